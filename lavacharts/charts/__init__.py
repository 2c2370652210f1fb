from lavacharts.charts.chart import CHART_REGISTRY, Chart, register_chart
from lavacharts.charts.factory import create_chart, resolve_chart_type
from lavacharts.charts.variants import (
    AreaChart,
    AxisChart,
    BarChart,
    BubbleChart,
    CalendarChart,
    CandlestickChart,
    ColumnChart,
    ComboChart,
    GaugeChart,
    GeoChart,
    HistogramChart,
    LineChart,
    PieChart,
    SankeyChart,
    ScatterChart,
    SteppedAreaChart,
    TableChart,
    TimelineChart,
    TreeMapChart,
)

__all__ = [
    "CHART_REGISTRY",
    "Chart",
    "register_chart",
    "create_chart",
    "resolve_chart_type",
    "AreaChart",
    "AxisChart",
    "BarChart",
    "BubbleChart",
    "CalendarChart",
    "CandlestickChart",
    "ColumnChart",
    "ComboChart",
    "GaugeChart",
    "GeoChart",
    "HistogramChart",
    "LineChart",
    "PieChart",
    "SankeyChart",
    "ScatterChart",
    "SteppedAreaChart",
    "TableChart",
    "TimelineChart",
    "TreeMapChart",
]
