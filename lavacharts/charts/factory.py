from typing import Any, Mapping

from lavacharts.charts.chart import CHART_REGISTRY, Chart
from lavacharts.constants import logger
from lavacharts.enums import ChartType
from lavacharts.exceptions import InvalidChartType
from lavacharts.support.contracts import DataTableSource
from lavacharts.values import Label

CHART_SUFFIX = "Chart"


def resolve_chart_type(chart_type: ChartType | str) -> type[Chart]:
    """Find the chart class for a type tag.

    "Line" and "LineChart" both resolve, as do tags registered without the
    suffix such as "Table".
    """
    if isinstance(chart_type, ChartType):
        chart_type = chart_type.value
    if not isinstance(chart_type, str):
        raise InvalidChartType(chart_type, CHART_REGISTRY.tags())
    if chart_type not in CHART_REGISTRY and chart_type + CHART_SUFFIX in CHART_REGISTRY:
        return CHART_REGISTRY.resolve(chart_type + CHART_SUFFIX)
    return CHART_REGISTRY.resolve(chart_type)


def create_chart(
    chart_type: ChartType | str,
    label: str | Label,
    datatable: DataTableSource | None,
    options: Mapping[str, Any] | None = None,
) -> Chart:
    chart_class = resolve_chart_type(chart_type)
    logger.debug("Resolved chart type %s to %s", chart_type, chart_class.__name__)
    return chart_class(label, datatable, options)
