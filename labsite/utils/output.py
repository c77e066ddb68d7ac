"""Console helpers shared by the CLI commands."""

import json
from typing import Any

from rich.console import Console

# Rich console shared by every command
console = Console()


def print_json(data: Any) -> None:
    """Write ``data`` to stdout as indented JSON; other types go through str()."""
    print(json.dumps(data, indent=2, default=str))


def truncate(text: str, width: int) -> str:
    """Truncate text to width, ending in "..." when shortened."""
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."
