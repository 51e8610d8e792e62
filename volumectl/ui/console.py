"""Console UI for VolumeCtl."""
import json
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from volumectl.core.exceptions import format_error
from volumectl.core.inspection import VolumeSummary


class ConsoleUI:
    """UI class for console output."""
    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print_error(self, error, show_traceback=False):
        """Print error message."""
        self.err_console.print(f"[red]Error:[/red] {escape(format_error(error))}", highlight=False)
        if show_traceback:
            self.err_console.print_exception()

    def print_success(self, message: str):
        self.console.print(f"[green]{escape(message)}[/green]")

    def print_warning(self, message: str):
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def print_json(self, data):
        self.console.print_json(json.dumps(data), highlight=False)

    def display_volume_list(self, names: List[str]):
        """Display volume names as a table."""
        if not names:
            self.print_warning("No volumes found")
            return

        table = Table(title=f"Volumes ({len(names)})")
        table.add_column("Name", style="cyan", no_wrap=True)
        for name in names:
            table.add_row(escape(name))
        self.console.print(table)

    def display_volume_details(self, summary: VolumeSummary):
        """Display name, creation time and labels of a volume."""
        labels = self._labels_table(summary.labels)
        header = (
            f"[bold]Name:[/bold] {escape(summary.name)}\n"
            f"[bold]Created:[/bold] {escape(summary.created_at)}"
        )
        self.console.print(
            Panel(header, title=f"Volume: {escape(summary.name)}", border_style="cyan")
        )
        if labels is not None:
            self.console.print(labels)
        else:
            self.console.print("[dim]No labels[/dim]")

    def _labels_table(self, labels: Dict[str, str]) -> Optional[Table]:
        if not labels:
            return None
        table = Table(title="Labels")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="yellow")
        for key in sorted(labels):
            table.add_row(escape(key), escape(labels[key]))
        return table

    def display_entries(self, entries: List[str], location: str):
        """Display directory entries of a volume path."""
        if not entries:
            self.print_warning(f"{location} is empty")
            return
        for entry in entries:
            self.console.print(entry, highlight=False, markup=False)

    def display_file(self, content: str):
        """Print file content verbatim."""
        self.console.print(content, end="", highlight=False, markup=False, soft_wrap=True)
