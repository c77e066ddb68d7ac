"""
Modal screens for the labsite TUI.
"""

import logging

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from labsite.models import Publication
from labsite.services.views import format_authors

from .badges import publication_type_badge

logger = logging.getLogger(__name__)


class PublicationDetailScreen(ModalScreen):
    """Abstract, topics and links of one publication."""

    CSS = """
    PublicationDetailScreen {
        align: center middle;
    }

    #pub-detail {
        width: 90;
        max-height: 80%;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    #pub-detail-title {
        text-style: bold;
        padding-bottom: 1;
    }

    #pub-detail-abstract {
        padding: 1 0;
    }
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
    ]

    def __init__(self, publication: Publication):
        super().__init__()
        self.publication = publication

    def compose(self) -> ComposeResult:
        pub = self.publication
        with VerticalScroll(id="pub-detail"):
            yield Label(pub.title, id="pub-detail-title")
            yield Static(
                f"{publication_type_badge(pub.type)}  {pub.venue} · {pub.year}\n"
                f"[dim]{format_authors(pub.authors)}[/dim]",
                id="pub-detail-meta",
            )
            yield Static(pub.abstract or "[dim]No abstract available[/dim]", id="pub-detail-abstract")
            if pub.tags:
                yield Static(f"[cyan]{' · '.join(pub.tags)}[/cyan]", id="pub-detail-tags")
            links = pub.links.to_dict()
            if links:
                yield Static(
                    "\n".join(f"[bold]{name}[/bold]: {url}" for name, url in links.items()),
                    id="pub-detail-links",
                )

    def on_mount(self) -> None:
        logger.info(f"PublicationDetailScreen mounted for {self.publication.id}")

    def action_close(self) -> None:
        self.dismiss(None)
