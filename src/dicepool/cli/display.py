"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.table import Table

from dicepool.types import DiceSpec, RollResults


# Shared console instance
console = Console()


def _format_dice(values: tuple[int, ...]) -> str:
    """Format a slice of dice, or a dash when empty."""
    if not values:
        return "-"
    return " ".join(str(v) for v in values)


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_roll_table(results: list[RollResults]) -> None:
    """Display one row per roll with its partition and total.

    Args:
        results: Rolls of the same spec, in the order they were made.
    """
    if not results:
        console.print("[dim]No rolls.[/dim]")
        return

    table = Table(title=str(results[0].spec), box=box.SIMPLE)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Raw", style="white")
    table.add_column("Dropped Low", style="red")
    table.add_column("Kept", style="green")
    table.add_column("Dropped High", style="red")
    table.add_column("Total", style="bold cyan", justify="right")

    for i, result in enumerate(results, start=1):
        table.add_row(
            str(i),
            _format_dice(result.raw),
            _format_dice(result.dropped_low),
            _format_dice(result.kept),
            _format_dice(result.dropped_high),
            str(result.total),
        )

    console.print(table)


def display_spec_summary(spec: DiceSpec) -> None:
    """Display a validated spec with its kept count and total range.

    Args:
        spec: A validated dice pool.
    """
    console.print(f"[bold green]{spec}[/bold green] is valid")
    console.print(f"  Dice kept: {spec.kept_count} of {spec.count}")
    console.print(f"  Total range: {spec.min_total}-{spec.max_total}")
