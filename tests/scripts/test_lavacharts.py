import json
from pathlib import Path

import pytest
from click.exceptions import Exit
from click.testing import CliRunner

from lavacharts.constants import CONFIG
from lavacharts.scripts.common import (
    handle_execution_exception,
    parse_label_or_index,
    parse_option_params,
    smart_convert,
)
from lavacharts.scripts.lavacharts import cli

TABLE = {
    "cols": [
        {"id": "month", "label": "Month", "type": "string"},
        {"id": "sales", "label": "Sales", "type": "number"},
    ],
    "rows": [{"c": [{"v": "January"}, {"v": 1000}]}],
}


@pytest.fixture
def table_file(tmp_path) -> Path:
    path = tmp_path / "sales.json"
    path.write_text(json.dumps(TABLE))
    return path


def invoke(args, **kwargs):
    runner = CliRunner()
    return runner.invoke(cli, args, **kwargs)


def test_chart(table_file):
    result = invoke(
        [
            "chart",
            "Line",
            "Sales",
            str(table_file),
            "-o",
            "title=Q1 Sales",
            "-o",
            "width=400",
            "--element-id",
            "chart-div",
        ]
    )
    if result.exception:
        raise result.exception

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "type": "LineChart",
        "label": "Sales",
        "options": {"title": "Q1 Sales", "width": 400},
        "datatable": TABLE,
        "element_id": "chart-div",
    }


def test_chart_from_stdin():
    result = invoke(["chart", "PieChart", "Share", "-"], input=json.dumps(TABLE))

    assert result.exit_code == 0
    assert json.loads(result.output)["datatable"] == TABLE


def test_chart_customize(table_file):
    result = invoke(
        [
            "chart",
            "Line",
            "Sales",
            str(table_file),
            "-c",
            'explorer={"actions": ["dragToZoom"]}',
            "-c",
            "width=wide",
        ]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["options"] == {
        "explorer": {"actions": ["dragToZoom"]},
        "width": "wide",
    }


def test_chart_bad_option(table_file):
    result = invoke(["chart", "Line", "Sales", str(table_file), "-o", "potato=1"])

    assert result.exit_code == 1
    assert "InvalidConfigProperty" in result.output
    assert "potato" in result.output


def test_chart_bad_type(table_file):
    result = invoke(["chart", "Potato", "Sales", str(table_file)])

    assert result.exit_code == 1
    assert "InvalidChartType" in result.output


def test_chart_bad_table(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    result = invoke(["chart", "Line", "Sales", str(path)])

    assert result.exit_code == 1
    assert "InvalidDataTable" in result.output


def test_malformed_option(table_file):
    result = invoke(["chart", "Line", "Sales", str(table_file), "-o", "title"])

    assert result.exit_code == 1
    assert "key=value" in result.output


def test_filter():
    result = invoke(["filter", "numberrange", "2", "-o", "minValue=0"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "type": "NumberRangeFilter",
        "options": {"minValue": 0, "filterColumnIndex": 2},
    }


def test_filter_by_label():
    result = invoke(["filter", "Category", "Region", "--indent", "2"])

    assert result.exit_code == 0
    assert "\n  " in result.output
    assert json.loads(result.output)["options"] == {"filterColumnLabel": "Region"}


def test_filter_bad_type():
    result = invoke(["filter", "Potato", "Region"])

    assert result.exit_code == 1
    assert "InvalidFilterType" in result.output


def test_types():
    result = invoke(["types"])

    assert result.exit_code == 0
    assert "LineChart (corechart v1)" in result.output
    assert "Calendar (calendar v1.1)" in result.output
    assert "DateRange -> DateRangeFilter" in result.output


def test_config_file(tmp_path, table_file):
    config_path = tmp_path / "lavacharts.toml"
    config_path.write_text(
        "strict_options = false\n"
        'js_namespace = "charts"\n'
        "[defaults.chart]\n"
        'title = "Default title"\n'
        "height = 300\n"
    )

    result = invoke(
        [
            "--config",
            str(config_path),
            "chart",
            "Line",
            "Sales",
            str(table_file),
            "-o",
            "potato=1",
            "-o",
            "title=Q1",
        ]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["options"] == {
        "title": "Q1",
        "height": 300,
        "potato": 1,
    }
    # settings do not leak past the command
    assert CONFIG.strict_options is True
    assert CONFIG.js_namespace == "google.visualization"


def test_bad_config_file(tmp_path):
    config_path = tmp_path / "lavacharts.toml"
    config_path.write_text('strict_options = "sometimes"\n')

    result = invoke(["--config", str(config_path), "types"])

    assert result.exit_code == 1
    assert "strict_options" in result.output


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("400", 400),
        ("0.4", 0.4),
        ("1e3", 1000.0),
        ("true", True),
        ("False", False),
        ("red", "red"),
        ('{"trigger": "both"}', {"trigger": "both"}),
        ('["red", "blue"]', ["red", "blue"]),
        ('"400"', "400"),
        ("{broken", "{broken"),
    ],
)
def test_smart_convert(raw, expected):
    assert smart_convert(raw) == expected


def test_parse_option_params():
    assert parse_option_params(["title=a=b", " width =5"]) == {
        "title": "a=b",
        "width": 5,
    }
    with pytest.raises(ValueError):
        parse_option_params(["title"])


def test_parse_label_or_index():
    assert parse_label_or_index("3") == 3
    assert parse_label_or_index("Region") == "Region"
    assert parse_label_or_index("-1") == "-1"


def test_handle_execution_exception():
    with pytest.raises(Exit) as exc_info:
        handle_execution_exception(ValueError("boom"))

    assert exc_info.value.exit_code == 1
