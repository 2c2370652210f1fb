"""Common helper functions used across all CLI commands."""

import json
import logging
import traceback
from typing import Any, Iterable

from click.exceptions import Exit

from lavacharts.constants import logger
from lavacharts.scripts.display import print_error


def smart_convert(value: str):
    """Convert string to appropriate Python type."""
    if not value:
        return value

    # objects, lists and quoted strings are taken as JSON
    if value[0] in "{[\"":
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    # Handle booleans
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    # Try numeric conversion
    try:
        if "." not in value and "e" not in value.lower():
            return int(value)
        return float(value)
    except ValueError:
        return value


def parse_option_params(option_list: Iterable[str]) -> dict[str, Any]:
    """Parse chart and filter options from key=value format with type conversion."""
    options: dict[str, Any] = {}
    for param in option_list:
        if "=" not in param:
            raise ValueError(f"Option must be in key=value format: {param}")
        key, value = param.split("=", 1)  # Split on first = only
        options[key.strip()] = smart_convert(value)
    return options


def parse_label_or_index(value: str) -> str | int:
    """Column references that look like integers are indexes."""
    if value.isdigit():
        return int(value)
    return value


def enable_debug_logging() -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(logging.DEBUG)


def handle_execution_exception(e: Exception, debug: bool = False) -> None:
    print_error(f"{type(e).__name__}: {e}")
    if debug:
        print_error(f"Full traceback:\n{traceback.format_exc()}")
    raise Exit(1) from e
