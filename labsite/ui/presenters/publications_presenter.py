"""
Presenter for the Publications screen.

Owns the view's FilterState and recomputes the derived list on every change.
The screen feeds it committed search queries (already debounced) and
dropdown selections, and renders the PublicationListVM it publishes.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Optional

from labsite.models import Publication
from labsite.services.filter_engine import FilterState, ListFilterEngine
from labsite.services.views import PUBLICATION_VIEW, format_authors
from labsite.ui.badges import publication_type_badge, publication_type_label
from labsite.ui.viewmodels import PublicationListItem, PublicationListVM

logger = logging.getLogger(__name__)


def to_list_item(publication: Publication) -> PublicationListItem:
    return PublicationListItem(
        id=publication.id,
        title=publication.title,
        authors_display=format_authors(publication.authors),
        venue=publication.venue,
        year=publication.year,
        type_label=publication_type_label(publication.type),
        type_badge=publication_type_badge(publication.type),
        tags=list(publication.tags),
        links=publication.links.available(),
    )


class PublicationsPresenter:
    """
    Handles publication filtering for the screen.

    Features:
    - Free-text search over title, authors, venue and topics
    - Year / type / topic dropdowns
    - Clear-all
    """

    def __init__(
        self,
        publications: Sequence[Publication],
        on_state_update: Callable[[PublicationListVM], Awaitable[None]] | None = None,
    ):
        self.on_state_update = on_state_update
        self._engine = ListFilterEngine(publications, PUBLICATION_VIEW)
        self._filter_state = FilterState()
        self._results: list[Publication] = []
        self._state = PublicationListVM()
        self._recompute()

    @property
    def state(self) -> PublicationListVM:
        """Get current state."""
        return self._state

    @property
    def filter_state(self) -> FilterState:
        return self._filter_state

    async def _notify_update(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_update:
            await self.on_state_update(self._state)

    def _recompute(self) -> None:
        self._results = self._engine.derive(self._filter_state)
        total = self._engine.total
        shown = len(self._results)
        self._state = PublicationListVM(
            items=[to_list_item(p) for p in self._results],
            options=self._engine.options(),
            query=self._filter_state.query,
            selections=dict(self._filter_state.selections),
            total_count=total,
            filtered_count=shown,
            has_active_filters=self._filter_state.has_active_filters,
            status_text=f"Showing {shown} of {total} publications",
        )

    async def _apply(self, new_state: FilterState) -> None:
        if new_state == self._filter_state:
            return
        self._filter_state = new_state
        self._recompute()
        await self._notify_update()

    async def load(self) -> None:
        """Publish the initial (unfiltered) state."""
        await self._notify_update()

    async def set_query(self, query: str) -> None:
        """Apply a committed search query."""
        await self._apply(self._filter_state.with_query(query))

    async def set_selection(self, name: str, value: Optional[str]) -> None:
        """Apply a dropdown selection; None or "all" removes the constraint."""
        await self._apply(self._filter_state.with_selection(name, value))

    async def clear_filters(self) -> None:
        """Reset every filter to its default."""
        logger.info("Clearing publication filters")
        await self._apply(self._filter_state.cleared())

    def get_publication(self, index: int) -> Publication | None:
        """Get the publication shown at the given index."""
        if 0 <= index < len(self._results):
            return self._results[index]
        return None

    def find_publication(self, publication_id: str) -> Publication | None:
        for publication in self._results:
            if publication.id == publication_id:
                return publication
        return None
