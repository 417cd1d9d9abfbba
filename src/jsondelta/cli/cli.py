"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from jsondelta.cli.commands import compare_cmd, configure_logging, lines_cmd, tree_cmd


app = typer.Typer(name="jsondelta", no_args_is_help=True, help="Line and structural diffs of JSON documents")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Compare JSON documents line by line and by tree path."""
    configure_logging(log_level)


app.command(name="lines")(lines_cmd)
app.command(name="tree")(tree_cmd)
app.command(name="compare")(compare_cmd)
