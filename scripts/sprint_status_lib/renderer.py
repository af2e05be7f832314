"""
Console output for the status report
"""

from typing import Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

Row = Tuple[str, str, str, str]


class ConsoleRenderer:
    """Writes report headers and box-drawn issue tables to the terminal"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def line(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def table(self, rows: Sequence[Row]) -> None:
        if not rows:
            return
        table = Table(box=box.SQUARE, show_header=False, show_lines=True)
        for _ in range(len(rows[0])):
            table.add_column()
        for row in rows:
            # Text cells: summaries may contain [brackets] that rich would treat as markup
            table.add_row(*(Text(cell) for cell in row))
        self.console.print(table)
