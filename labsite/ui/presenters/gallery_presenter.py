"""
Presenter for the Gallery screen.

Filters media items by category and drives the lightbox over the items
currently visible, so next/previous walk the filtered set.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from datetime import date

from labsite.models import MediaItem
from labsite.services.filter_engine import ALL, FilterState, ListFilterEngine
from labsite.services.views import GALLERY_VIEW
from labsite.ui.badges import category_badge
from labsite.ui.lightbox import LightboxNavigator, ScrollLock
from labsite.ui.viewmodels import GalleryItemVM, GalleryVM

logger = logging.getLogger(__name__)

CATEGORY_FIELD = "category"


def format_media_date(value: str | None) -> str | None:
    """Format an ISO date as e.g. "Mar 2024"."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10]).strftime("%b %Y")
    except ValueError:
        return value


def to_gallery_item(item: MediaItem) -> GalleryItemVM:
    return GalleryItemVM(
        id=item.id,
        src=item.src,
        alt=item.alt,
        caption=item.caption,
        category=item.category.value,
        category_badge=category_badge(item.category),
        event=item.event,
        date_display=format_media_date(item.date),
    )


class GalleryPresenter:
    """Category filtering plus lightbox navigation for the gallery."""

    def __init__(
        self,
        items: Sequence[MediaItem],
        on_state_update: Callable[[GalleryVM], Awaitable[None]] | None = None,
        scroll_lock: ScrollLock | None = None,
    ):
        self.on_state_update = on_state_update
        self._engine = ListFilterEngine(items, GALLERY_VIEW)
        self._filter_state = FilterState()
        self._visible: list[MediaItem] = self._engine.derive(self._filter_state)
        self.lightbox = LightboxNavigator(len(self._visible), scroll_lock=scroll_lock)
        self._state = GalleryVM()
        self._rebuild()

    @property
    def state(self) -> GalleryVM:
        return self._state

    @property
    def visible_items(self) -> list[MediaItem]:
        return list(self._visible)

    @property
    def current_item(self) -> MediaItem | None:
        if not self.lightbox.is_open:
            return None
        return self._visible[self.lightbox.current_index]

    async def _notify_update(self) -> None:
        if self.on_state_update:
            await self.on_state_update(self._state)

    def _rebuild(self) -> None:
        items = [to_gallery_item(item) for item in self._visible]
        shown = len(items)
        current = items[self.lightbox.current_index] if self.lightbox.is_open else None
        self._state = GalleryVM(
            items=items,
            categories=self._engine.options()[CATEGORY_FIELD],
            selected_category=self._filter_state.selection(CATEGORY_FIELD),
            total_count=self._engine.total,
            filtered_count=shown,
            status_text=f"Showing {shown} images",
            empty_message="" if shown else "No images found in this category.",
            lightbox=self.lightbox.state,
            current_item=current,
            position_label=self.lightbox.position_label if self.lightbox.has_multiple else "",
        )

    async def load(self) -> None:
        await self._notify_update()

    async def select_category(self, category: str | None) -> None:
        """Show only one category; None or "all" shows everything."""
        new_state = self._filter_state.with_selection(CATEGORY_FIELD, category or ALL)
        if new_state == self._filter_state:
            return
        self._filter_state = new_state
        self._visible = self._engine.derive(self._filter_state)
        self.lightbox.set_image_count(len(self._visible))
        logger.info(f"Gallery category {new_state.selection(CATEGORY_FIELD)!r}: {len(self._visible)} items")
        self._rebuild()
        await self._notify_update()

    async def _after_navigation(self) -> None:
        self._rebuild()
        await self._notify_update()

    async def open_item(self, index: int) -> None:
        self.lightbox.open(index)
        await self._after_navigation()

    async def close_lightbox(self) -> None:
        self.lightbox.close()
        await self._after_navigation()

    async def next_item(self) -> None:
        self.lightbox.next()
        await self._after_navigation()

    async def previous_item(self) -> None:
        self.lightbox.previous()
        await self._after_navigation()

    async def handle_key(self, key: str) -> bool:
        """Route a key press to the lightbox. Returns True if it was used."""
        handled = self.lightbox.handle_key(key)
        if handled:
            await self._after_navigation()
        return handled

    def dispose(self) -> None:
        self.lightbox.dispose()
