"""
Publications View - filterable list of the lab's papers.

Features:
- Search bar with debounced live filtering
- Year / type / topic dropdowns
- Enter to view the abstract and links in a modal
"""

import asyncio
import logging
from typing import Any, Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Input, OptionList, Select, Static
from textual.widgets.option_list import Option

from labsite.config.constants import DEFAULT_DEBOUNCE_MS, MAX_TITLE_DISPLAY
from labsite.config.settings import get_debounce_ms
from labsite.exceptions import ConfigurationError
from labsite.models import Publication
from labsite.services.filter_engine import ALL, FilterOption
from labsite.utils.output import truncate

from .debounce import DebouncedInputController
from .modals import PublicationDetailScreen
from .presenters.publications_presenter import PublicationsPresenter
from .viewmodels import PublicationListItem, PublicationListVM

logger = logging.getLogger(__name__)

# Filter field name -> Select widget id
FILTER_SELECTS = {
    "year": "filter-year",
    "type": "filter-type",
    "tags": "filter-tags",
}


def _resolve_debounce_ms() -> int:
    try:
        return get_debounce_ms()
    except ConfigurationError as e:
        logger.warning(f"{e}; using {DEFAULT_DEBOUNCE_MS} ms")
        return DEFAULT_DEBOUNCE_MS


def _select_options(options: list[FilterOption]) -> list[tuple[str, str]]:
    return [(option.label, option.value) for option in options]


class PublicationsView(Widget):
    """
    Publication list with a search bar and filter dropdowns.

    Layout:
    - Search input
    - Filter row (year, type, topic)
    - Results list
    - Status bar ("Showing X of Y publications")
    """

    BINDINGS = [
        Binding("ctrl+l", "clear_filters", "Clear filters"),
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear search", show=False),
    ]

    DEFAULT_CSS = """
    PublicationsView {
        layout: grid;
        grid-size: 1;
        grid-rows: 3 3 1fr 1;
    }

    #pub-search-input {
        width: 1fr;
        border: solid $primary-darken-1;
    }

    #pub-search-input:focus {
        border: solid $primary;
    }

    #pub-filters {
        height: 3;
    }

    #pub-filters Select {
        width: 1fr;
    }

    #pub-results {
        height: 1fr;
        scrollbar-gutter: stable;
    }

    #pub-status {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(self, publications: Sequence[Publication], *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.presenter = PublicationsPresenter(publications, on_state_update=self._on_state_update)
        self._debouncer = DebouncedInputController(
            on_commit=self._on_query_committed,
            interval_ms=_resolve_debounce_ms(),
            schedule=self.set_timer,
        )

    def compose(self) -> ComposeResult:
        state = self.presenter.state
        yield Input(
            placeholder="Search by title, author, venue, or topic...",
            id="pub-search-input",
        )
        with Horizontal(id="pub-filters"):
            for name, select_id in FILTER_SELECTS.items():
                yield Select(
                    _select_options(state.options.get(name, [])),
                    value=ALL,
                    allow_blank=False,
                    id=select_id,
                )
        yield OptionList(id="pub-results")
        yield Static("", id="pub-status")

    async def on_mount(self) -> None:
        logger.info("PublicationsView mounted")
        self._render_state_sync(self.presenter.state)

    def on_unmount(self) -> None:
        self._debouncer.cancel()

    async def _on_state_update(self, state: PublicationListVM) -> None:
        """Handle state updates from presenter."""
        self.call_later(self._render_state_sync, state)

    def _render_state_sync(self, state: PublicationListVM) -> None:
        results = self.query_one("#pub-results", OptionList)
        results.clear_options()
        for item in state.items:
            results.add_option(Option(self._format_item(item), id=item.id))

        status = state.status_text
        if state.has_active_filters:
            status += " | ctrl+l clears filters"
        if not state.items:
            status += " | No publications match"
        self.query_one("#pub-status", Static).update(status)

    def _format_item(self, item: PublicationListItem) -> str:
        title = truncate(item.title, MAX_TITLE_DISPLAY)
        line1 = f"{item.type_badge} [bold]{title}[/bold]"
        line2 = f"[dim]{item.authors_display} · {item.venue} · {item.year}[/dim]"
        if item.tags:
            return f"{line1}\n{line2}\n[cyan]{' '.join(item.tags)}[/cyan]"
        return f"{line1}\n{line2}"

    def _on_query_committed(self, query: str) -> None:
        asyncio.create_task(self.presenter.set_query(query))

    def on_input_changed(self, event: Input.Changed) -> None:
        """Feed keystrokes to the debouncer."""
        if event.input.id != "pub-search-input":
            return
        self._debouncer.on_raw_change(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter commits the pending query and moves to the results."""
        if event.input.id != "pub-search-input":
            return
        self._debouncer.flush()
        results = self.query_one("#pub-results", OptionList)
        if results.option_count > 0:
            results.focus()

    async def on_select_changed(self, event: Select.Changed) -> None:
        for name, select_id in FILTER_SELECTS.items():
            if event.select.id == select_id:
                value = event.value if isinstance(event.value, str) else ALL
                await self.presenter.set_selection(name, value)
                return

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "pub-results" or not event.option.id:
            return
        publication = self.presenter.find_publication(event.option.id)
        if publication is not None:
            self.app.push_screen(PublicationDetailScreen(publication))

    def action_focus_search(self) -> None:
        self.query_one("#pub-search-input", Input).focus()

    def _reset_search_input(self) -> None:
        search_input = self.query_one("#pub-search-input", Input)
        with search_input.prevent(Input.Changed):
            search_input.value = ""

    def action_clear_search(self) -> None:
        """Empty the search box without waiting for the debounce."""
        self._reset_search_input()
        self._debouncer.clear()

    async def action_clear_filters(self) -> None:
        """Reset the search box and every dropdown."""
        self._reset_search_input()
        self._debouncer.clear()
        for select_id in FILTER_SELECTS.values():
            select = self.query_one(f"#{select_id}", Select)
            with select.prevent(Select.Changed):
                select.value = ALL
        await self.presenter.clear_filters()
        self.notify("Filters cleared", timeout=1)
