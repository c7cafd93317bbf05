"""CLI context management."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from src.cli.utils.output import OutputFormatter
from src.infrastructure.filesystem import DirectoryStore


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    root: Path
    formatter: OutputFormatter
    console: Console

    def get_store(self) -> DirectoryStore:
        """
        Get a store for the selected data root.

        Returns:
            DirectoryStore instance
        """
        return DirectoryStore(self.root)
