"""Payload commands for the lavacharts CLI."""

from click import File, argument, echo, option, pass_context

from lavacharts.charts import CHART_REGISTRY, create_chart
from lavacharts.config import RuntimeConfig
from lavacharts.constants import CONFIG
from lavacharts.datatables import StaticDataTable
from lavacharts.exceptions import LavaChartsException
from lavacharts.filters import FILTER_REGISTRY, create_filter
from lavacharts.scripts.common import (
    handle_execution_exception,
    parse_label_or_index,
    parse_option_params,
)
from lavacharts.scripts.display import print_header, print_info
from lavacharts.serialization import to_json


@argument("chart_type")
@argument("label")
@argument("datatable", type=File("r"))
@option(
    "--option", "-o", "options", multiple=True, help="Chart option as key=value"
)
@option(
    "--customize",
    "-c",
    "customizations",
    multiple=True,
    help="Unchecked option as key=value, for options this library does not know",
)
@option("--element-id", default=None, help="Id of the element to draw into")
@option("--indent", type=int, default=None, help="Indent the JSON output")
@pass_context
def chart(
    ctx, chart_type, label, datatable, options, customizations, element_id, indent
):
    """Build a chart and print its JSON payload.

    DATATABLE is a JSON file holding the table, or - to read stdin.
    """
    runtime: RuntimeConfig = ctx.obj["CONFIG"]
    try:
        with CONFIG.temporary(
            strict_options=runtime.strict_options, js_namespace=runtime.js_namespace
        ):
            table = StaticDataTable.from_file(datatable)
            built = create_chart(
                chart_type,
                label,
                table,
                runtime.chart_options(parse_option_params(options)),
            )
            if customizations:
                built.customize(parse_option_params(customizations))
            if element_id:
                built.set_element_id(element_id)
            echo(to_json(built, indent=indent))
    except (LavaChartsException, ValueError) as e:
        handle_execution_exception(e, debug=ctx.obj["DEBUG"])


@argument("filter_type")
@argument("label_or_index")
@option(
    "--option", "-o", "options", multiple=True, help="Filter option as key=value"
)
@option("--indent", type=int, default=None, help="Indent the JSON output")
@pass_context
def filter_(ctx, filter_type, label_or_index, options, indent):
    """Build a dashboard filter and print its JSON payload.

    LABEL_OR_INDEX is a column label, or a column index when it is a number.
    """
    runtime: RuntimeConfig = ctx.obj["CONFIG"]
    try:
        with CONFIG.temporary(
            strict_options=runtime.strict_options, js_namespace=runtime.js_namespace
        ):
            built = create_filter(
                filter_type,
                parse_label_or_index(label_or_index),
                runtime.filter_options(parse_option_params(options)),
            )
            echo(to_json(built, indent=indent))
    except (LavaChartsException, ValueError) as e:
        handle_execution_exception(e, debug=ctx.obj["DEBUG"])


def types():
    """List the chart and filter types that can be built."""
    print_header("Charts")
    for tag in CHART_REGISTRY:
        meta = CHART_REGISTRY.metadata(tag)
        print_info(f"  {tag} ({meta.package} v{meta.version})")
    print_header("Filters")
    for tag in FILTER_REGISTRY:
        meta = FILTER_REGISTRY.metadata(tag)
        print_info(f"  {tag} -> {meta.type}")
