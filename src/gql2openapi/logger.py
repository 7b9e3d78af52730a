"""Rich-backed logging for gql2openapi, shared by the library and the CLI."""

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class GQL2OpenAPILogger(logging.Logger):
    """
    Logger with a Rich console attached.

    Library code only uses the standard levels. The extra methods render
    command output (operation listings, generated documents) for the CLI.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        super().__init__(name, level)
        self.console = Console()

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """Print a message to the console, Rich markup allowed."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """
        Print a success message prefixed with a green checkmark.

        Args:
            message: Message to display
        """
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        self.print(f"[dim]{message}[/dim]")

    def rule(self, title: str, style: str = "bold blue") -> None:
        """
        Print a horizontal separator with a title.

        Args:
            title: Title text for the rule
            style: Rich style string (default: "bold blue")
        """
        self.console.rule(f"[{style}]{title}")

    def print_dict(self, data: dict[str, Any]) -> None:
        """Print a JSON-serializable mapping with syntax highlighting."""
        self.console.print_json(json.dumps(data, indent=2))

    def key_value(self, key: str, value: Any, key_style: str = "dim") -> None:
        """
        Print a `key: value` line.

        Args:
            key: The label to display
            value: The value to display
            key_style: Style for the label (default: "dim")
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")

    def list_item(self, text: str, prefix: str = "-") -> None:
        self.print(f"{prefix} {text}")


def get_logger(name: str = "gql2openapi") -> GQL2OpenAPILogger:
    """
    Get or create a gql2openapi logger instance.

    Args:
        name: Logger name (default: "gql2openapi")

    Returns:
        GQL2OpenAPILogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(GQL2OpenAPILogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
