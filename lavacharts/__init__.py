from lavacharts.charts import Chart, create_chart
from lavacharts.constants import CONFIG
from lavacharts.datatables import StaticDataTable
from lavacharts.filters import Filter, FilterFactory, create_filter
from lavacharts.support.options import Options
from lavacharts.values import ElementId, Label

__version__ = "3.1.0"

__all__ = [
    "Chart",
    "create_chart",
    "Filter",
    "FilterFactory",
    "create_filter",
    "Options",
    "Label",
    "ElementId",
    "StaticDataTable",
    "CONFIG",
]
