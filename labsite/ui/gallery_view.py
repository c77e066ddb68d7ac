"""
Gallery View - media items filtered by category, opened in a lightbox.
"""

import logging
from typing import Any, Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from labsite.models import MediaItem

from .lightbox_screen import LightboxScreen, WidgetScrollLock
from .presenters.gallery_presenter import GalleryPresenter
from .viewmodels import GalleryItemVM, GalleryVM

logger = logging.getLogger(__name__)


class GalleryView(Widget):
    """
    Category chips on the left, items on the right.

    Enter on a category filters the items; Enter on an item opens the
    lightbox at that item.
    """

    DEFAULT_CSS = """
    GalleryView {
        layout: grid;
        grid-size: 1;
        grid-rows: 1fr 1;
    }

    #gallery-body {
        height: 1fr;
    }

    #gallery-categories {
        width: 24;
        border-right: solid $primary-darken-2;
    }

    #gallery-list {
        width: 1fr;
        scrollbar-gutter: stable;
    }

    #gallery-status {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(self, items: Sequence[MediaItem], *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.scroll_lock = WidgetScrollLock(self._gallery_list_or_none)
        self.presenter = GalleryPresenter(
            items, on_state_update=self._on_state_update, scroll_lock=self.scroll_lock
        )

    def _gallery_list_or_none(self) -> OptionList | None:
        matches = self.query("#gallery-list")
        return matches.first(OptionList) if matches else None

    def compose(self) -> ComposeResult:
        with Horizontal(id="gallery-body"):
            yield OptionList(id="gallery-categories")
            yield OptionList(id="gallery-list")
        yield Static("", id="gallery-status")

    def on_mount(self) -> None:
        logger.info("GalleryView mounted")
        self._render_categories(self.presenter.state)
        self._render_state_sync(self.presenter.state)

    def on_unmount(self) -> None:
        self.presenter.dispose()

    async def _on_state_update(self, state: GalleryVM) -> None:
        self.call_later(self._render_state_sync, state)

    def _render_categories(self, state: GalleryVM) -> None:
        categories = self.query_one("#gallery-categories", OptionList)
        categories.clear_options()
        for option in state.categories:
            categories.add_option(Option(option.label, id=option.value))

    def _render_state_sync(self, state: GalleryVM) -> None:
        gallery = self.query_one("#gallery-list", OptionList)
        gallery.clear_options()
        for item in state.items:
            gallery.add_option(Option(self._format_item(item), id=item.id))

        status = state.status_text
        if state.empty_message:
            status = f"{status} | {state.empty_message}"
        self.query_one("#gallery-status", Static).update(status)

    def _format_item(self, item: GalleryItemVM) -> str:
        details = [part for part in (item.event, item.date_display) if part]
        line1 = f"{item.category_badge} [bold]{item.caption}[/bold]"
        if details:
            return f"{line1}\n[dim]{' · '.join(details)}[/dim]"
        return line1

    async def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id == "gallery-categories":
            await self.presenter.select_category(event.option.id)
        elif event.option_list.id == "gallery-list":
            await self.presenter.open_item(event.option_index)
            if self.presenter.lightbox.is_open:
                self.app.push_screen(LightboxScreen(self.presenter))
