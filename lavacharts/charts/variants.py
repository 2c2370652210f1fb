from lavacharts.charts.chart import Chart, register_chart
from lavacharts.configs.layout import AXIS, LEGEND, ChartArea, Tooltip
from lavacharts.configs.styles import TEXT_STYLE
from lavacharts.enums import ChartType
from lavacharts.support.rules import (
    BOOLEAN,
    INTEGER,
    MAPPING,
    NON_NEGATIVE_INT,
    NUMERIC,
    SEQUENCE,
    STRING,
    any_of,
    between,
    instance_of,
    one_of,
    sequence_of,
)

SIZE_RULES = {
    "height": NUMERIC,
    "width": NUMERIC,
}

FRAME_RULES = {
    **SIZE_RULES,
    "animation": MAPPING,
    "events": MAPPING,
    "forceIFrame": BOOLEAN,
}

COMMON_RULES = {
    **FRAME_RULES,
    "backgroundColor": any_of(STRING, MAPPING),
    "chartArea": any_of(instance_of(ChartArea), MAPPING),
    "colors": SEQUENCE,
    "enableInteractivity": BOOLEAN,
    "fontName": STRING,
    "fontSize": NUMERIC,
    "legend": LEGEND,
    "theme": any_of(STRING, MAPPING),
    "title": STRING,
    "titlePosition": one_of("in", "out", "none"),
    "titleTextStyle": TEXT_STYLE,
    "tooltip": any_of(instance_of(Tooltip), MAPPING),
}

AXIS_RULES = {
    **COMMON_RULES,
    "aggregationTarget": one_of("category", "series", "auto", "none"),
    "annotations": MAPPING,
    "axisTitlesPosition": one_of("in", "out", "none"),
    "crosshair": MAPPING,
    "dataOpacity": between(0, 1),
    "explorer": MAPPING,
    "focusTarget": one_of("datum", "category"),
    "hAxes": any_of(MAPPING, SEQUENCE),
    "hAxis": AXIS,
    "interpolateNulls": BOOLEAN,
    "orientation": one_of("horizontal", "vertical"),
    "reverseCategories": BOOLEAN,
    "selectionMode": one_of("single", "multiple"),
    "series": any_of(MAPPING, SEQUENCE),
    "trendlines": MAPPING,
    "vAxes": any_of(MAPPING, SEQUENCE),
    "vAxis": AXIS,
}

STACKING = any_of(BOOLEAN, one_of("percent", "relative", "absolute"))

LINE_RULES = {
    "curveType": one_of("none", "function"),
    "lineDashStyle": sequence_of(NUMERIC),
    "lineWidth": NUMERIC,
    "pointShape": any_of(STRING, MAPPING),
    "pointSize": NUMERIC,
    "pointsVisible": BOOLEAN,
}

COLOR_AXIS_RULES = {
    "colorAxis": MAPPING,
    "sizeAxis": MAPPING,
}


class AxisChart(Chart):
    """Charts drawn on a horizontal and vertical axis."""

    option_rules = AXIS_RULES
    allowed_options = frozenset(AXIS_RULES)


@register_chart(ChartType.AREA)
class AreaChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        **LINE_RULES,
        "areaOpacity": between(0, 1),
        "isStacked": STACKING,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.BAR)
class BarChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        "bar": MAPPING,
        "bars": one_of("horizontal", "vertical"),
        "isStacked": STACKING,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.BUBBLE)
class BubbleChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        **COLOR_AXIS_RULES,
        "bubble": MAPPING,
        "sortBubblesBySize": BOOLEAN,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.CANDLESTICK)
class CandlestickChart(AxisChart):
    option_rules = {**AXIS_RULES, "bar": MAPPING, "candlestick": MAPPING}
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.COLUMN)
class ColumnChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        "bar": MAPPING,
        "bars": one_of("horizontal", "vertical"),
        "isStacked": STACKING,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.COMBO)
class ComboChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        **LINE_RULES,
        "areaOpacity": between(0, 1),
        "bar": MAPPING,
        "candlestick": MAPPING,
        "isStacked": STACKING,
        "seriesType": one_of("line", "area", "bars", "candlesticks", "steppedArea"),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.HISTOGRAM)
class HistogramChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        "bar": MAPPING,
        "histogram": MAPPING,
        "isStacked": STACKING,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.LINE)
class LineChart(AxisChart):
    option_rules = {**AXIS_RULES, **LINE_RULES}
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.SCATTER)
class ScatterChart(AxisChart):
    option_rules = {**AXIS_RULES, **LINE_RULES}
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.STEPPED_AREA)
class SteppedAreaChart(AxisChart):
    option_rules = {
        **AXIS_RULES,
        "areaOpacity": between(0, 1),
        "connectSteps": BOOLEAN,
        "isStacked": STACKING,
        "lineDashStyle": sequence_of(NUMERIC),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.PIE)
class PieChart(Chart):
    option_rules = {
        **COMMON_RULES,
        "is3D": BOOLEAN,
        "pieHole": between(0, 1),
        "pieResidueSliceColor": STRING,
        "pieResidueSliceLabel": STRING,
        "pieSliceBorderColor": STRING,
        "pieSliceText": one_of("percentage", "value", "label", "none"),
        "pieSliceTextStyle": TEXT_STYLE,
        "pieStartAngle": NUMERIC,
        "reverseCategories": BOOLEAN,
        "sliceVisibilityThreshold": NUMERIC,
        "slices": any_of(MAPPING, SEQUENCE),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.GEO, package="geochart")
class GeoChart(Chart):
    option_rules = {
        **COMMON_RULES,
        **COLOR_AXIS_RULES,
        "datalessRegionColor": STRING,
        "defaultColor": STRING,
        "displayMode": one_of("auto", "regions", "markers", "text"),
        "domain": STRING,
        "keepAspectRatio": BOOLEAN,
        "magnifyingGlass": MAPPING,
        "markerOpacity": between(0, 1),
        "region": STRING,
        "resolution": one_of("countries", "provinces", "metros"),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.GAUGE, package="gauge")
class GaugeChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "greenColor": STRING,
        "greenFrom": NUMERIC,
        "greenTo": NUMERIC,
        "majorTicks": SEQUENCE,
        "max": NUMERIC,
        "min": NUMERIC,
        "minorTicks": INTEGER,
        "redColor": STRING,
        "redFrom": NUMERIC,
        "redTo": NUMERIC,
        "yellowColor": STRING,
        "yellowFrom": NUMERIC,
        "yellowTo": NUMERIC,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.TABLE, package="table")
class TableChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "allowHtml": BOOLEAN,
        "alternatingRowStyle": BOOLEAN,
        "cssClassNames": MAPPING,
        "firstRowNumber": INTEGER,
        "frozenColumns": NON_NEGATIVE_INT,
        "page": one_of("enable", "event", "disable"),
        "pageSize": NON_NEGATIVE_INT,
        "pagingButtons": any_of(
            NON_NEGATIVE_INT, one_of("both", "prev", "next", "auto")
        ),
        "rtlTable": BOOLEAN,
        "scrollLeftStartPosition": NUMERIC,
        "showRowNumber": BOOLEAN,
        "sort": one_of("enable", "event", "disable"),
        "sortAscending": BOOLEAN,
        "sortColumn": INTEGER,
        "startPage": NON_NEGATIVE_INT,
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.CALENDAR, version="1.1", package="calendar")
class CalendarChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "calendar": MAPPING,
        "colorAxis": MAPPING,
        "noDataPattern": MAPPING,
        "title": STRING,
        "tooltip": any_of(instance_of(Tooltip), MAPPING),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.TIMELINE, package="timeline")
class TimelineChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "avoidOverlappingGridLines": BOOLEAN,
        "backgroundColor": any_of(STRING, MAPPING),
        "colors": SEQUENCE,
        "enableInteractivity": BOOLEAN,
        "fontName": STRING,
        "fontSize": NUMERIC,
        "timeline": MAPPING,
        "tooltip": any_of(instance_of(Tooltip), MAPPING),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.SANKEY, package="sankey")
class SankeyChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "sankey": MAPPING,
        "tooltip": any_of(instance_of(Tooltip), MAPPING),
    }
    allowed_options = frozenset(option_rules)


@register_chart(ChartType.TREE_MAP, package="treemap")
class TreeMapChart(Chart):
    option_rules = {
        **FRAME_RULES,
        "fontColor": STRING,
        "fontFamily": STRING,
        "fontSize": NUMERIC,
        "headerColor": STRING,
        "headerHeight": NUMERIC,
        "headerHighlightColor": STRING,
        "maxColor": STRING,
        "maxColorValue": NUMERIC,
        "maxDepth": NON_NEGATIVE_INT,
        "maxPostDepth": NON_NEGATIVE_INT,
        "midColor": STRING,
        "minColor": STRING,
        "minColorValue": NUMERIC,
        "noColor": STRING,
        "showScale": BOOLEAN,
        "showTooltips": BOOLEAN,
        "title": STRING,
        "titleTextStyle": TEXT_STYLE,
        "useWeightedAverageForAggregation": BOOLEAN,
    }
    allowed_options = frozenset(option_rules)
