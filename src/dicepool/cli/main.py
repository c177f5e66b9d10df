"""Main CLI application for rolling dice pools."""

import logging
from typing import Optional

import typer
from pydantic import ValidationError

from dicepool.cli.display import (
    console,
    display_error,
    display_roll_table,
    display_spec_summary,
)
from dicepool.config import get_settings
from dicepool.errors import DiceSpecError
from dicepool.parser import DiceParseError, parse_spec
from dicepool.random_source import RandomSource, SystemRandomSource, get_default_source
from dicepool.roller import roll
from dicepool.types import DiceSpec

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dicepool",
    help="Roll dice pools with drop-low/drop-high (e.g. 5d20L2H1)",
    add_completion=False,
)


def _load_spec(notation: str) -> DiceSpec:
    """Parse notation and apply the configured size limits, or exit 1."""
    settings = get_settings()
    try:
        spec = parse_spec(notation)
    except (DiceParseError, DiceSpecError) as e:
        display_error(str(e))
        raise typer.Exit(1)

    if spec.count > settings.max_count:
        display_error(f"Too many dice: {spec.count} (max {settings.max_count})")
        raise typer.Exit(1)
    if spec.sides > settings.max_sides:
        display_error(f"Too many sides: {spec.sides} (max {settings.max_sides})")
        raise typer.Exit(1)
    return spec


@app.command("roll")
def roll_command(
    notation: Optional[str] = typer.Argument(
        None, help="Dice notation, e.g. 4d6L1 (defaults to DICEPOOL_DEFAULT_NOTATION)"
    ),
    times: int = typer.Option(1, "--times", "-n", min=1, help="Number of times to roll"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible run"),
    total_only: bool = typer.Option(False, "--total-only", "-t", help="Print only the totals"),
) -> None:
    """Roll a dice pool and show which dice were kept."""
    spec = _load_spec(notation or get_settings().default_notation)

    source: RandomSource
    if seed is not None:
        source = SystemRandomSource(seed=seed)
    else:
        source = get_default_source()

    results = [roll(spec, source) for _ in range(times)]
    logger.info("Rolled %s %d time(s)", spec, times)

    if total_only:
        for result in results:
            console.print(str(result.total))
        return

    display_roll_table(results)


@app.command("check")
def check_command(
    notation: str = typer.Argument(..., help="Dice notation to validate"),
) -> None:
    """Validate a dice pool and show its total range."""
    spec = _load_spec(notation)
    display_spec_summary(spec)


@app.callback()
def main() -> None:
    """Dice pool roller.

    Use 'dicepool roll 4d6L1' to roll, 'dicepool check 5d20L2H1' to validate.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        display_error(f"Invalid DICEPOOL_* settings: {errors}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


if __name__ == "__main__":
    app()
