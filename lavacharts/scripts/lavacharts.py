from pathlib import Path as PathlibPath

from click import Path, group, option, pass_context

from lavacharts.config import get_runtime_config
from lavacharts.exceptions import LavaChartsException
from lavacharts.scripts.commands import chart, filter_, types
from lavacharts.scripts.common import enable_debug_logging, handle_execution_exception


@group()
@option("--debug", is_flag=True, default=False, help="Enable debug mode")
@option(
    "--config",
    "config_path",
    type=Path(exists=True, dir_okay=False, path_type=PathlibPath),
    default=None,
    help="Path to a lavacharts.toml file",
)
@pass_context
def cli(ctx, debug: bool, config_path: PathlibPath | None):
    """Lavacharts CLI - build Google Charts payloads from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = debug

    if debug:
        enable_debug_logging()
    try:
        ctx.obj["CONFIG"] = get_runtime_config(config_path)
    except (LavaChartsException, OSError, ValueError) as e:
        handle_execution_exception(e, debug=debug)


cli.command("chart")(chart)
cli.command("filter")(filter_)
cli.command("types")(types)


if __name__ == "__main__":
    cli()
