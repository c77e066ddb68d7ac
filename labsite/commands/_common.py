"""Helpers shared by the CLI command modules."""

from pathlib import Path
from typing import Optional

import typer

from labsite.content import ContentLoader


def get_loader(ctx: typer.Context) -> ContentLoader:
    """Build a ContentLoader from the global --content-dir option."""
    content_dir: Optional[Path] = None
    if ctx.obj:
        content_dir = ctx.obj.get("content_dir")
    return ContentLoader(content_dir)
