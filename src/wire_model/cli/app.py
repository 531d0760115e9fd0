import logging
from typing import Annotated

import typer

from wire_model.cli.decode import decode
from wire_model.cli.schema import inspect

app = typer.Typer(
    name="wire-model",
    help="wire-model CLI: inspect model schemas and decode API envelopes.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command("inspect")(inspect)
app.command("decode")(decode)


def main() -> None:
    app()
