"""Campus Directory CLI.

Usage:
    python -m campus_directory <command> [options]

Every command prints JSON on stdout. Building messages are logged to
stderr at CAMPUS_LOG_LEVEL.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn, Optional

import typer

from campus_directory.config import Config
from campus_directory.models import Building, Cafe, CampusMap, smith_campus

app = typer.Typer(
    name="campus-directory",
    help="Campus Directory — buildings, libraries, houses and cafes on a campus map.",
    no_args_is_help=True,
)

KINDS = ("building", "library", "house", "cafe")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> NoReturn:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _first_of_kind(campus: CampusMap, kind: str) -> Building | None:
    return next((b for b in campus.buildings if b.kind == kind), None)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    try:
        Config.validate()
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def version() -> None:
    """Show version."""
    from campus_directory import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def directory() -> None:
    """Print the sample campus directory."""
    campus = smith_campus()
    _output({
        "ok": True,
        "count": len(campus),
        "buildings": [
            {"name": b.name, "address": b.address, "type": b.kind}
            for b in campus.buildings
        ],
        "rendered": campus.render(),
    })


@app.command()
def options(kind: str = typer.Argument(..., help="building | library | house | cafe")):
    """List the operations available on a kind of building."""
    kind = kind.lower()
    if kind not in KINDS:
        _fail(f"Unknown building kind '{kind}'. Choose from: {', '.join(KINDS)}")
    building = _first_of_kind(smith_campus(), kind)
    _output({
        "ok": True,
        "kind": kind,
        "building": building.name,
        "options": building.show_options(),
    })


@app.command()
def sell(
    size: Optional[int] = typer.Option(None, help="Coffee size in ounces"),
    sugar: Optional[int] = typer.Option(None, help="Sugar packets"),
    cream: Optional[int] = typer.Option(None, help="Cream portions"),
):
    """Sell one coffee at the sample campus cafe."""
    cafe = _first_of_kind(smith_campus(), "cafe")
    if not isinstance(cafe, Cafe):
        _fail("The sample campus has no cafe")
    std_size, std_sugar, std_cream = Config.standard_order()
    sale = cafe.sell(
        std_size if size is None else size,
        std_sugar if sugar is None else sugar,
        std_cream if cream is None else cream,
    )
    coffee, sugar_left, cream_left, cups = cafe.stock()
    _output({
        "ok": True,
        "cafe": cafe.name,
        "sale": sale.model_dump(),
        "stock": {
            "coffee_ounces": coffee,
            "sugar_packets": sugar_left,
            "cream_portions": cream_left,
            "cups": cups,
        },
    })


if __name__ == "__main__":
    app()
