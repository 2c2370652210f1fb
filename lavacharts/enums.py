from enum import Enum


class WrapType(Enum):
    CHART = "chartType"
    CONTROL = "controlType"


class ChartType(Enum):
    AREA = "AreaChart"
    BAR = "BarChart"
    BUBBLE = "BubbleChart"
    CALENDAR = "Calendar"
    CANDLESTICK = "CandlestickChart"
    COLUMN = "ColumnChart"
    COMBO = "ComboChart"
    GAUGE = "Gauge"
    GEO = "GeoChart"
    HISTOGRAM = "Histogram"
    LINE = "LineChart"
    PIE = "PieChart"
    SANKEY = "Sankey"
    SCATTER = "ScatterChart"
    STEPPED_AREA = "SteppedAreaChart"
    TABLE = "Table"
    TIMELINE = "Timeline"
    TREE_MAP = "TreeMap"


class FilterType(Enum):
    CATEGORY = "Category"
    CHART_RANGE = "ChartRange"
    DATE_RANGE = "DateRange"
    NUMBER_RANGE = "NumberRange"
    STRING = "String"


class StringMatchType(Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    ANY = "any"
