import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from wire_model.cli.loading import load_model
from wire_model.core.envelope import RawResponse, decode_list, decode_single
from wire_model.core.errors import WireModelError
from wire_model.core.serializer import wire_default

console = Console()


def decode(
    model: Annotated[str, typer.Argument(help="Model class as MODULE:CLASS.")],
    file: Annotated[Path, typer.Argument(help="File holding a raw response body.", exists=True, dir_okay=False)],
    many: Annotated[bool, typer.Option("--list", help="Decode a list response instead of a single result.")] = False,
    wrapper: Annotated[str | None, typer.Option(help="Key to unwrap each element with.")] = None,
) -> None:
    """Decode a response envelope into MODEL and print it back as wire JSON."""
    model_type = load_model(model)
    try:
        raw = RawResponse(body=file.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        console.print(f"[red]Body file is not valid UTF-8: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        if many:
            response = decode_list(raw, model_type, wrapper)
        else:
            response = decode_single(raw, model_type, wrapper)
    except WireModelError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    payload: dict[str, Any] = {"value": response.value}
    if response.pagination is not None:
        payload["pagination"] = response.pagination
    console.print_json(json.dumps(payload, default=wire_default))
