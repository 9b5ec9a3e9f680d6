"""
ID number command line tool

Validate, inspect and generate South African ID numbers, and look them up
with the Home Affairs service.
"""

from __future__ import annotations

import json
import random
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from api import HomeAffairsClient
from core.config import config
from utils.logger import get_logger, mask_id_number
from validators import describe, generate, random_identifier, validate

app = typer.Typer(
    name="sa-id",
    help="Validate and generate South African ID numbers",
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)


@app.command("validate")
def validate_command(
    id_numbers: Annotated[
        List[str],
        typer.Argument(help="ID numbers to check (spaces and hyphens allowed)"),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            "--strict/--lax",
            help="Reject days past the end of the month (default: ID_STRICT_DATES)",
        ),
    ] = config.ID_STRICT_DATES,
) -> None:
    """
    Validate one or more ID numbers.

    Exits with status 1 if any of them is invalid.
    """
    table = Table(title="ID number validation")
    table.add_column("ID number", style="cyan")
    table.add_column("Result")
    table.add_column("Detail", style="dim")

    all_valid = True
    for value in id_numbers:
        result = validate(value, strict=strict)
        if result.is_valid:
            table.add_row(result.id_number, "[green]valid[/green]", result.message)
        else:
            all_valid = False
            table.add_row(
                result.id_number or repr(value),
                f"[red]{result.error.value}[/red]",
                result.message,
            )

    console.print(table)
    if not all_valid:
        raise typer.Exit(code=1)


@app.command("info")
def info_command(
    id_number: Annotated[str, typer.Argument(help="ID number to decode")],
) -> None:
    """Show the fields and conventional meaning of a valid ID number."""
    result = validate(id_number)
    if not result.is_valid:
        console.print(f"[red]Invalid:[/red] {result.message}")
        raise typer.Exit(code=1)

    info = describe(result.id_number, result.fields)
    fields = result.fields

    table = Table(title=result.id_number, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Birth date digits", fields.birth_date_digits)
    table.add_row("Date of birth", info.date_of_birth or "-")
    table.add_row("Age", "-" if info.age is None else str(info.age))
    table.add_row("Sequence block", f"{fields.sequence_block:04d}")
    table.add_row("Gender", info.gender.value)
    table.add_row("Citizenship", f"{fields.citizenship_digit} ({info.citizenship.value})")
    table.add_row("Filler digit", str(fields.filler_digit))
    table.add_row("Check digit", str(fields.checksum_digit))
    console.print(table)


@app.command("generate")
def generate_command(
    year: Annotated[int, typer.Option("--year", help="Two-digit birth year (0-99)")],
    month: Annotated[int, typer.Option("--month", help="Birth month (1-12)")],
    day: Annotated[int, typer.Option("--day", help="Birth day (1-31)")],
    sequence: Annotated[int, typer.Option("--sequence", help="Sequence block (0-9999)")],
    citizenship: Annotated[
        int, typer.Option("--citizenship", help="0 citizen, 1 permanent resident")
    ] = 0,
    filler: Annotated[
        Optional[int],
        typer.Option("--filler", help="Legacy digit 11 (default: ID_DEFAULT_FILLER_DIGIT)"),
    ] = None,
) -> None:
    """Generate a checksum-valid ID number from its fields."""
    if filler is None:
        filler = config.ID_DEFAULT_FILLER_DIGIT
    try:
        id_number = generate(year, month, day, sequence, citizenship, filler)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2)
    typer.echo(id_number)


@app.command("random")
def random_command(
    count: Annotated[
        int, typer.Option("--count", "-n", min=1, help="How many to generate")
    ] = 1,
    seed: Annotated[
        Optional[int], typer.Option("--seed", help="Seed for reproducible output")
    ] = None,
) -> None:
    """Generate random valid ID numbers for test fixtures."""
    rng = random.Random(seed)
    for _ in range(count):
        try:
            id_number = random_identifier(rng, filler_digit=config.ID_DEFAULT_FILLER_DIGIT)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(code=2)
        typer.echo(id_number)


@app.command("verify")
def verify_command(
    id_number: Annotated[str, typer.Argument(help="ID number to look up")],
    demo_fallback: Annotated[
        bool,
        typer.Option("--demo-fallback", help="Use decoded demo data if the service is down"),
    ] = False,
) -> None:
    """Look an ID number up with the Home Affairs service."""
    client = HomeAffairsClient(allow_demo_fallback=demo_fallback or None)
    result = client.verify_id(id_number)
    console.print_json(json.dumps(result))
    if not result.get("success"):
        logger.warning(f"Lookup failed for {mask_id_number(id_number)}: {result.get('code')}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
