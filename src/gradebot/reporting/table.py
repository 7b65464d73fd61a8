from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gradebot.reporting import Rubric


def render_table(rubric: Rubric) -> Table:
    """Rubric table: one row per result plus a footer of column totals."""
    table = Table(box=box.ROUNDED, show_footer=True)
    table.add_column("Rubric Item")
    table.add_column("Error?", footer=Text("Total", justify="right"))
    table.add_column("Possible", footer=str(rubric.total_possible), justify="right")
    table.add_column("Awarded", footer=str(rubric.total_awarded), justify="right")

    for result in rubric.results:
        table.add_row(
            result.label,
            result.message,
            str(result.possible),
            str(result.awarded),
        )
    return table


def print_rubric(
    rubric: Rubric, only_total: bool = False, console: Console | None = None
) -> None:
    """Print the rubric table, or only the awarded total."""
    console = console or Console()
    if only_total:
        console.print(str(rubric.total_awarded), highlight=False)
        return
    console.print(render_table(rubric))
