from lavacharts.configs.base import ConfigObject
from lavacharts.support.rules import (
    BOOLEAN,
    MAPPING,
    NUMERIC,
    STRING,
    any_of,
    instance_of,
)


class Gradient(ConfigObject):
    """Linear gradient fill, used by BoxStyle."""

    allowed_options = frozenset(
        {"color1", "color2", "x1", "y1", "x2", "y2", "useObjectBoundingBoxUnits"}
    )
    option_rules = {
        "color1": STRING,
        "color2": STRING,
        "x1": STRING,
        "y1": STRING,
        "x2": STRING,
        "y2": STRING,
        "useObjectBoundingBoxUnits": BOOLEAN,
    }


class BoxStyle(ConfigObject):
    """Style of the box around annotations and tooltips."""

    allowed_options = frozenset({"stroke", "strokeWidth", "rx", "ry", "gradient"})
    option_rules = {
        "stroke": STRING,
        "strokeWidth": NUMERIC,
        "rx": NUMERIC,
        "ry": NUMERIC,
        "gradient": any_of(instance_of(Gradient), MAPPING),
    }


class TextStyle(ConfigObject):
    allowed_options = frozenset(
        {"color", "fontName", "fontSize", "bold", "italic", "auraColor", "opacity"}
    )
    option_rules = {
        "color": STRING,
        "fontName": STRING,
        "fontSize": NUMERIC,
        "bold": BOOLEAN,
        "italic": BOOLEAN,
        "auraColor": STRING,
        "opacity": NUMERIC,
    }


TEXT_STYLE = any_of(instance_of(TextStyle), MAPPING)
