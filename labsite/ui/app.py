"""
Main Textual application for browsing the lab's content.
"""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static, TabbedContent, TabPane

from labsite.config.constants import DEFAULT_NEWS_LIMIT
from labsite.content import ContentLoader
from labsite.services.views import order_news

from .gallery_view import GalleryView
from .publications_view import PublicationsView
from .themes import (
    ThemePreference,
    ThemeStore,
    detect_system_prefers_dark,
    next_preference,
    preference_indicator,
    register_all_themes,
    resolve_theme,
    textual_theme_name,
)

logger = logging.getLogger(__name__)


class LabsiteApp(App):
    """Tabbed browser: publications, gallery and news."""

    TITLE = "labsite"

    CSS = """
    #news-list {
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+t", "cycle_theme", "Theme"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        content_dir: Optional[Path] = None,
        theme_store: Optional[ThemeStore] = None,
        loader: Optional[ContentLoader] = None,
    ):
        super().__init__()
        self.loader = loader or ContentLoader(content_dir)
        self.theme_store = theme_store or ThemeStore()
        self.theme_preference = ThemePreference.SYSTEM

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial="tab-publications"):
            with TabPane("Publications", id="tab-publications"):
                yield PublicationsView(self.loader.load_publications(), id="publications-view")
            with TabPane("Gallery", id="tab-gallery"):
                yield GalleryView(self.loader.load_media(), id="gallery-view")
            with TabPane("News", id="tab-news"):
                yield Static(self._format_news(), id="news-list")
        yield Footer()

    def _format_news(self) -> str:
        lines = []
        for item in order_news(self.loader.load_news(), max_items=DEFAULT_NEWS_LIMIT):
            pin = "📌 " if item.pinned else ""
            lines.append(f"{pin}[bold]{item.title}[/bold] [dim]{item.date} · {item.type.value}[/dim]")
            lines.append(f"  {item.description}")
            if item.link:
                lines.append(f"  [cyan]{item.link}[/cyan]")
            lines.append("")
        return "\n".join(lines) or "[dim]No news yet[/dim]"

    def on_mount(self) -> None:
        register_all_themes(self)
        self.theme_preference = self.theme_store.load()
        self.apply_theme_preference()
        logger.info(f"labsite TUI started with theme preference {self.theme_preference.value}")

    def apply_theme_preference(self) -> None:
        resolved = resolve_theme(self.theme_preference, detect_system_prefers_dark())
        self.theme = textual_theme_name(resolved)
        self.sub_title = (
            f"{preference_indicator(self.theme_preference)} {self.theme_preference.value}"
        )

    def action_cycle_theme(self) -> None:
        """Cycle light -> dark -> system and persist the choice."""
        self.theme_preference = next_preference(self.theme_preference)
        self.theme_store.save(self.theme_preference)
        self.apply_theme_preference()
        self.notify(f"Theme: {self.theme_preference.value}", timeout=1)

