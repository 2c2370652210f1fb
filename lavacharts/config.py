from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tomllib import loads

from lavacharts.constants import CONFIG_FILE_NAME, DEFAULT_JS_NAMESPACE
from lavacharts.exceptions import InvalidParamType


@dataclass
class RuntimeConfig:
    strict_options: bool = True
    js_namespace: str = DEFAULT_JS_NAMESPACE
    chart_defaults: dict[str, Any] = field(default_factory=dict)
    filter_defaults: dict[str, Any] = field(default_factory=dict)

    def chart_options(self, options: dict[str, Any]) -> dict[str, Any]:
        """Caller options layered over the configured chart defaults."""
        return {**self.chart_defaults, **options}

    def filter_options(self, options: dict[str, Any]) -> dict[str, Any]:
        return {**self.filter_defaults, **options}


def load_config_file(path: Path) -> RuntimeConfig:
    with open(path, "r") as f:
        toml_content = f.read()
    config_data = loads(toml_content)

    defaults: dict = config_data.get("defaults", {})
    chart_defaults = defaults.get("chart", {})
    filter_defaults = defaults.get("filter", {})
    for name, value in (("chart", chart_defaults), ("filter", filter_defaults)):
        if not isinstance(value, dict):
            raise InvalidParamType(f"defaults.{name}", "a table", value)
    strict_options = config_data.get("strict_options", True)
    if not isinstance(strict_options, bool):
        raise InvalidParamType("strict_options", "a boolean", strict_options)
    return RuntimeConfig(
        strict_options=strict_options,
        js_namespace=config_data.get("js_namespace", DEFAULT_JS_NAMESPACE),
        chart_defaults=chart_defaults,
        filter_defaults=filter_defaults,
    )


def find_config(start_path: Path | None = None) -> Path | None:
    """
    Search for lavacharts.toml from the given path up through its parents.

    Args:
        start_path: Starting directory for search. If None, uses the current
            working directory.

    Returns:
        Path to lavacharts.toml if found, None otherwise.
    """
    search_path = start_path if start_path else Path.cwd()
    if not search_path.is_dir():
        search_path = search_path.parent

    for parent in [search_path] + list(search_path.parents):
        candidate = parent / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
    return None


def get_runtime_config(config_override: Path | None = None) -> RuntimeConfig:
    config_path = config_override or find_config()
    if not config_path:
        return RuntimeConfig()
    return load_config_file(config_path)
