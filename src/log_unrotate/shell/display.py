from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from pathlib import Path

    from log_unrotate.core.models import StepReport


class UnrotateDisplay:
    """
    Console stand-in for the tray notifications.

    Step errors show up as individual warning panels, a crash as a single
    error panel.
    """

    def __init__(self, app_name: str, console: Optional[Console] = None) -> None:
        self.app_name = app_name
        self.console = console or Console()

    def show_started(self, watched_dir: Path, collection_root: Path, interval: float) -> None:
        text = Text()
        text.append("Watching: ", style="cyan")
        text.append(str(watched_dir), style="bold")
        text.append("\nCollecting into: ", style="cyan")
        text.append(str(collection_root), style="bold")
        text.append(f"\nInterval: {interval:g}s", style="dim")
        self.console.print(
            Panel(text, title=f"{self.app_name} is running", border_style="green"),
        )

    def show_error(self, error: BaseException) -> None:
        self.console.print(
            Panel(
                Text(str(error)),
                title=f"An error occurred while {self.app_name} was running",
                border_style="yellow",
            ),
        )

    def show_crash(self) -> None:
        self.console.print(
            Panel(
                Text(
                    f"{self.app_name} hit an unrecoverable error and has stopped. "
                    "It will not resume until it is restarted.",
                    style="bold",
                ),
                title=f"{self.app_name} crashed",
                border_style="red",
            ),
        )

    def show_stopped(self) -> None:
        self.console.print(f"[green]{self.app_name} stopped.[/green]")

    def show_step_report(self, report: StepReport, collection_root: Path) -> None:
        table = Table(title=f"Step summary ({collection_root})")
        table.add_column("Candidates", justify="right", style="cyan")
        table.add_column("Linked", justify="right", style="green")
        table.add_column("Already linked", justify="right", style="blue")
        table.add_column("Skipped", justify="right", style="yellow")
        table.add_row(
            str(report.candidates),
            str(report.linked),
            str(report.already_linked),
            str(report.skipped),
        )
        self.console.print(table)
