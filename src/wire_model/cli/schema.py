from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wire_model.cli.loading import load_model
from wire_model.core.errors import WireModelError
from wire_model.core.metadata import check_schema, fields_of
from wire_model.core.serializer import determine_wire_name

console = Console()


def inspect(
    model: Annotated[str, typer.Argument(help="Model class as MODULE:CLASS.")],
) -> None:
    """Show the field descriptors of a model and every model it nests."""
    model_type = load_model(model)
    try:
        reachable = check_schema(model_type)
    except WireModelError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    for current in reachable:
        table = Table(title=current.__name__, show_lines=False)
        for header in ("attribute", "wire name", "wire type", "sequence"):
            table.add_column(header)
        for name, descriptor in fields_of(current).items():
            table.add_row(
                name,
                determine_wire_name(current, name),
                descriptor.wire_type,
                "yes" if descriptor.is_sequence else "no",
            )
        console.print(table)
