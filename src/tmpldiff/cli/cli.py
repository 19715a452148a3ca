"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from tmpldiff.cli.commands import diff_cmd, list_cmd, render_cmd


app = typer.Typer(name="tmpldiff", no_args_is_help=True, help="Preview how rendered templates differ from deployed files")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    ctx.obj = {"verbose": verbose}


app.command(name="diff")(diff_cmd)
app.command(name="list")(list_cmd)
app.command(name="render")(render_cmd)
