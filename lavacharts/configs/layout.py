from lavacharts.configs.base import ConfigObject
from lavacharts.configs.styles import TEXT_STYLE
from lavacharts.support.rules import (
    BOOLEAN,
    DIMENSION,
    INTEGER,
    MAPPING,
    NON_NEGATIVE_INT,
    NUMERIC,
    SEQUENCE,
    STRING,
    any_of,
    instance_of,
    one_of,
)


class Legend(ConfigObject):
    allowed_options = frozenset(
        {"alignment", "maxLines", "pageIndex", "position", "textStyle"}
    )
    option_rules = {
        "alignment": one_of("start", "center", "end"),
        "maxLines": NON_NEGATIVE_INT,
        "pageIndex": NON_NEGATIVE_INT,
        "position": one_of("bottom", "left", "in", "none", "right", "top", "labeled"),
        "textStyle": TEXT_STYLE,
    }


class ChartArea(ConfigObject):
    allowed_options = frozenset(
        {"backgroundColor", "left", "top", "right", "bottom", "width", "height"}
    )
    option_rules = {
        "backgroundColor": any_of(STRING, MAPPING),
        "left": DIMENSION,
        "top": DIMENSION,
        "right": DIMENSION,
        "bottom": DIMENSION,
        "width": DIMENSION,
        "height": DIMENSION,
    }


class Tooltip(ConfigObject):
    allowed_options = frozenset(
        {"ignoreBounds", "isHtml", "showColorCode", "textStyle", "trigger"}
    )
    option_rules = {
        "ignoreBounds": BOOLEAN,
        "isHtml": BOOLEAN,
        "showColorCode": BOOLEAN,
        "textStyle": TEXT_STYLE,
        "trigger": one_of("focus", "none", "selection", "both"),
    }


class Axis(ConfigObject):
    """Options shared by the horizontal and vertical axes."""

    allowed_options = frozenset(
        {
            "baseline",
            "baselineColor",
            "direction",
            "format",
            "gridlines",
            "logScale",
            "maxValue",
            "minValue",
            "minorGridlines",
            "scaleType",
            "textPosition",
            "textStyle",
            "ticks",
            "title",
            "titleTextStyle",
            "viewWindow",
            "viewWindowMode",
        }
    )
    option_rules = {
        "baselineColor": STRING,
        "direction": one_of(1, -1),
        "format": STRING,
        "gridlines": MAPPING,
        "logScale": BOOLEAN,
        "maxValue": NUMERIC,
        "minValue": NUMERIC,
        "minorGridlines": MAPPING,
        "scaleType": one_of("log", "mirrorLog"),
        "textPosition": one_of("out", "in", "none"),
        "textStyle": TEXT_STYLE,
        "ticks": SEQUENCE,
        "title": STRING,
        "titleTextStyle": TEXT_STYLE,
        "viewWindow": MAPPING,
        "viewWindowMode": one_of("pretty", "maximized", "explicit"),
    }


class HorizontalAxis(Axis):
    allowed_options = Axis.allowed_options | {
        "allowContainerBoundaryTextCutoff",
        "maxAlternation",
        "maxTextLines",
        "showTextEvery",
        "slantedText",
        "slantedTextAngle",
    }
    option_rules = {
        **Axis.option_rules,
        "allowContainerBoundaryTextCutoff": BOOLEAN,
        "maxAlternation": INTEGER,
        "maxTextLines": INTEGER,
        "showTextEvery": NON_NEGATIVE_INT,
        "slantedText": BOOLEAN,
        "slantedTextAngle": NUMERIC,
    }


class VerticalAxis(Axis):
    pass


AXIS = any_of(instance_of(Axis), MAPPING)
LEGEND = any_of(instance_of(Legend), MAPPING, one_of("none"))
