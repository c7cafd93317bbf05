"""Output formatting utilities for CLI."""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def format_size(size: Optional[int]) -> str:
    """Human readable byte count."""
    if size is None:
        return "-"

    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024

    return f"{size} B"


class OutputFormatter:
    """Handle output formatting for different formats."""

    def __init__(self, format_type: str = "table"):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
        """
        self.console = Console()
        try:
            self.format = OutputFormat(format_type.lower())
        except ValueError:
            self.format = OutputFormat.TABLE

    def _dump(self, data: Any) -> None:
        if self.format == OutputFormat.JSON:
            self.console.print(
                json.dumps(data, indent=2, default=str),
                soft_wrap=True,
                markup=False,
                highlight=False,
            )
        else:
            self.console.print(
                yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
                soft_wrap=True,
            )

    def print_entries(
        self,
        items: List[Dict[str, Any]],
        title: Optional[str] = None,
    ):
        """
        Print directory entries.

        Args:
            items: Entry dictionaries as produced by ``DirectoryEntry.to_dict``
            title: Table title (for table format)
        """
        if self.format != OutputFormat.TABLE:
            self._dump(items)
            return

        if not items:
            self.console.print("[dim]Directory is empty[/dim]")
            return

        table = Table(title=escape(title) if title else None)
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("Last Modified")

        for item in items:
            name = escape(item["name"])
            if item["isDirectory"]:
                name = f"[bold]{name}/[/bold]"
            table.add_row(
                name,
                item["type"],
                format_size(item["size"]),
                item["lastModified"],
            )

        self.console.print(table)

    def print_detail(
        self,
        item: Dict[str, Any],
        title: Optional[str] = None,
    ):
        """
        Print detailed view of a single item.

        Args:
            item: Item to print
            title: Optional title
        """
        if self.format != OutputFormat.TABLE:
            self._dump(item)
            return

        if title:
            self.console.print(f"[bold]{escape(title)}[/bold]\n")

        for key, value in item.items():
            if value is None:
                formatted_value = "[dim]Not set[/dim]"
            elif isinstance(value, bool):
                formatted_value = "[green]Yes[/green]" if value else "[red]No[/red]"
            else:
                formatted_value = escape(str(value))

            self.console.print(f"[cyan]{key}:[/cyan] {formatted_value}")

    def print_success(self, message: str):
        """Print success message."""
        if self.format == OutputFormat.TABLE:
            self.console.print(f"[green]✓[/green] {escape(message)}")
        else:
            self._dump({"status": "success", "message": message})

    def print_error(self, message: str):
        """Print error message."""
        if self.format == OutputFormat.TABLE:
            self.console.print(f"[red]✗[/red] {escape(message)}")
        else:
            self._dump({"status": "error", "message": message})
