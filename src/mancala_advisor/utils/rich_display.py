"""
Rich-based terminal display for games and analysis.

Provides clean, formatted output with:
- Board panel with stores at the ends
- Scored move tables
- Status lines for info, success, warnings and errors
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core import GameState, MoveResult
from ..solver import ScoredMove

console = Console()
logger = logging.getLogger(__name__)


class BoardDisplay:
    """
    Rich-based display for a game in progress.

    Shows:
    - The board, side 1 on top and side 0 below
    - Last move details (captures, extra turns)
    - Move quality tables from analysis
    """

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize display.

        Args:
            output: Console to print to (defaults to the module console)
        """
        self.console = output or console

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, rules_name: str, mode: str, depth: Optional[int]):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Rules: {rules_name}")
        self.console.print(f"Mode: {mode}" + (f" (AI depth {depth})" if depth else ""))
        self.console.print()

    def board_table(self, state: GameState) -> Table:
        """Create the board table."""
        n = state.num_pits
        table = Table(show_header=False, box=None, padding=(0, 1))
        for _ in range(n + 2):
            table.add_column(justify="center")

        top = [f"[magenta]{s}[/magenta]" for s in reversed(state.pits[1])]
        bottom = [f"[cyan]{s}[/cyan]" for s in state.pits[0]]
        top_labels = [f"[dim]{chr(ord('A') + i)}[/dim]" for i in reversed(range(n))]
        bottom_labels = [f"[dim]{chr(ord('a') + i)}[/dim]" for i in range(n)]

        table.add_row("", *top_labels, "")
        table.add_row("", *top, "")
        table.add_row(
            f"[bold magenta]{state.store[1]}[/bold magenta]",
            *([""] * n),
            f"[bold cyan]{state.store[0]}[/bold cyan]",
        )
        table.add_row("", *bottom, "")
        table.add_row("", *bottom_labels, "")
        return table

    def show_board(self, state: GameState, title: Optional[str] = None):
        """Show the board in a panel."""
        subtitle = Text(f"Side {state.to_move} to move")
        self.console.print(
            Panel(self.board_table(state), title=title or "Board", subtitle=subtitle, expand=False)
        )

    def show_move(self, result: MoveResult):
        """Describe a move that was just played."""
        letter = chr(ord("a" if result.mover == 0 else "A") + result.pit_index)
        parts = [f"Side {result.mover} played [bold]{letter}[/bold] (pit {result.pit_index})"]
        if result.capture.happened:
            parts.append(f"[red]captured {result.capture.captured}[/red]")
        if result.extra_turn:
            parts.append("[green]extra turn[/green]")
        if result.swept:
            parts.append("[yellow]board swept[/yellow]")
        self.log_info(" | ".join(parts))

    def moves_table(self, scored: Sequence[ScoredMove], side: int) -> Table:
        """Create a table of scored moves, best first."""
        table = Table(title="Move quality")
        table.add_column("Rank", justify="right", style="dim")
        table.add_column("Move", justify="center")
        table.add_column("Pit", justify="right")
        table.add_column("Score", justify="right", style="bold")

        base = "a" if side == 0 else "A"
        for rank, item in enumerate(scored, start=1):
            table.add_row(
                str(rank), chr(ord(base) + item.move), str(item.move), f"{item.score:g}"
            )
        return table

    def show_moves(self, scored: Sequence[ScoredMove], side: int):
        """Show scored moves."""
        if not scored:
            self.log_warning("No legal moves")
            return
        self.console.print(self.moves_table(scored, side))


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
