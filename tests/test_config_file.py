from pathlib import Path

import pytest

from lavacharts.config import (
    RuntimeConfig,
    find_config,
    get_runtime_config,
    load_config_file,
)
from lavacharts.constants import DEFAULT_JS_NAMESPACE
from lavacharts.exceptions import InvalidParamType

CONFIG_TEXT = """
strict_options = false
js_namespace = "charts"

[defaults.chart]
backgroundColor = "#FAFAFA"
width = 600

[defaults.filter]
ui = { label = "Pick" }
"""


def write_config(directory: Path, text: str = CONFIG_TEXT) -> Path:
    path = directory / "lavacharts.toml"
    path.write_text(text)
    return path


def test_load_config_file(tmp_path):
    config = load_config_file(write_config(tmp_path))

    assert config.strict_options is False
    assert config.js_namespace == "charts"
    assert config.chart_defaults == {"backgroundColor": "#FAFAFA", "width": 600}
    assert config.filter_defaults == {"ui": {"label": "Pick"}}


def test_empty_config_file(tmp_path):
    config = load_config_file(write_config(tmp_path, ""))

    assert config == RuntimeConfig()
    assert config.js_namespace == DEFAULT_JS_NAMESPACE


def test_bad_strict_options(tmp_path):
    with pytest.raises(InvalidParamType):
        load_config_file(write_config(tmp_path, 'strict_options = "no"'))


def test_bad_defaults_table(tmp_path):
    with pytest.raises(InvalidParamType):
        load_config_file(write_config(tmp_path, "[defaults]\nchart = 5\n"))


def test_find_config_walks_up(tmp_path):
    expected = write_config(tmp_path)
    nested = tmp_path / "reports" / "monthly"
    nested.mkdir(parents=True)

    assert find_config(nested) == expected
    assert find_config(nested / "report.py") == expected


def test_find_config_missing(tmp_path):
    assert find_config(tmp_path) != tmp_path / "lavacharts.toml"


def test_get_runtime_config_override(tmp_path):
    path = write_config(tmp_path)

    assert get_runtime_config(path).js_namespace == "charts"


def test_caller_options_override_defaults():
    config = RuntimeConfig(
        chart_defaults={"width": 600, "title": "Default"},
        filter_defaults={"ui": {"label": "Pick"}},
    )

    assert config.chart_options({"title": "Q1"}) == {"width": 600, "title": "Q1"}
    assert config.filter_options({}) == {"ui": {"label": "Pick"}}
