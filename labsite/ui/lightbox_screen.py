"""
Lightbox modal for the gallery.

Shows one media item at a time over the gallery. Navigation state lives in
the GalleryPresenter's LightboxNavigator; this screen only maps keys and
clicks onto it and renders the result.
"""

import logging
from typing import Callable, Optional

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widget import Widget
from textual.widgets import Label, Static

from .presenters.gallery_presenter import GalleryPresenter
from .viewmodels import GalleryVM

logger = logging.getLogger(__name__)


class WidgetScrollLock:
    """Suspends scrolling of a background widget while the lightbox is open."""

    def __init__(self, get_target: Callable[[], Optional[Widget]]):
        self._get_target = get_target
        self._saved_overflow: Optional[str] = None
        self.locked = False

    def acquire(self) -> None:
        target = self._get_target()
        if target is not None and not self.locked:
            self._saved_overflow = target.styles.overflow_y
            target.styles.overflow_y = "hidden"
        self.locked = True

    def release(self) -> None:
        target = self._get_target()
        if target is not None and self.locked:
            target.styles.overflow_y = self._saved_overflow or "auto"
        self.locked = False


class LightboxScreen(ModalScreen):
    """Full-screen viewer for the current gallery item."""

    CSS = """
    LightboxScreen {
        align: center middle;
        background: $background 90%;
    }

    #lightbox {
        width: 80%;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    #lightbox-image {
        height: auto;
        min-height: 5;
        content-align: center middle;
        text-align: center;
        color: $text-muted;
    }

    #lightbox-caption {
        width: 100%;
        text-align: center;
        text-style: bold;
        padding-top: 1;
    }

    #lightbox-meta, #lightbox-position {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("left", "previous", "Previous"),
        Binding("right", "next", "Next"),
    ]

    def __init__(self, presenter: GalleryPresenter):
        super().__init__()
        self.presenter = presenter

    def compose(self) -> ComposeResult:
        with Vertical(id="lightbox"):
            yield Static("", id="lightbox-image")
            yield Label("", id="lightbox-caption")
            yield Static("", id="lightbox-meta")
            yield Static("", id="lightbox-position")

    def on_mount(self) -> None:
        logger.info(f"LightboxScreen opened at {self.presenter.lightbox.position_label}")
        self.render_state(self.presenter.state)

    def on_unmount(self) -> None:
        # Covers every exit path, including the app quitting under the modal
        self.presenter.dispose()

    def render_state(self, state: GalleryVM) -> None:
        item = state.current_item
        if item is None:
            return
        self.query_one("#lightbox-image", Static).update(f"🖼  {item.alt}\n[dim]{item.src}[/dim]")
        self.query_one("#lightbox-caption", Label).update(item.caption)
        meta = [item.category_badge]
        if item.event:
            meta.append(item.event)
        if item.date_display:
            meta.append(item.date_display)
        self.query_one("#lightbox-meta", Static).update(" · ".join(meta))
        self.query_one("#lightbox-position", Static).update(state.position_label)

    async def action_close(self) -> None:
        await self.presenter.close_lightbox()
        self.dismiss(None)

    async def action_next(self) -> None:
        if self.presenter.lightbox.has_multiple:
            await self.presenter.next_item()
            self.render_state(self.presenter.state)

    async def action_previous(self) -> None:
        if self.presenter.lightbox.has_multiple:
            await self.presenter.previous_item()
            self.render_state(self.presenter.state)

    async def on_click(self, event: events.Click) -> None:
        """Clicking the overlay outside the panel closes the lightbox."""
        if event.widget is self:
            await self.action_close()
