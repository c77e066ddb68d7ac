"""View configurations for the lab's filterable collections."""

from datetime import date
from typing import Iterable, List, Optional

from labsite.config.constants import MAX_AUTHORS_DISPLAYED
from labsite.models import NewsItem

from .filter_engine import FieldKind, FilterField, ListViewConfig

# Publications: search title/authors/venue/topics, filter by year, type and
# topic, newest first.
PUBLICATION_VIEW = ListViewConfig(
    search_fields=("title", "authors", "venue", "tags"),
    filter_fields=(
        FilterField("year", "Year", all_label="All Years", kind=FieldKind.ORDINAL),
        FilterField("type", "Type", all_label="All Types", capitalize_labels=True),
        FilterField("tags", "Topic", all_label="All Topics"),
    ),
    sort_key="year",
    sort_descending=True,
)

# Gallery: category chips only, content-file order.
GALLERY_VIEW = ListViewConfig(
    filter_fields=(
        FilterField("category", "Category", all_label="All", capitalize_labels=True),
    ),
)


def _news_date(item: NewsItem) -> date:
    try:
        return date.fromisoformat(item.date[:10])
    except ValueError:
        return date.min


def order_news(items: Iterable[NewsItem], max_items: Optional[int] = None) -> List[NewsItem]:
    """Pinned items first, then most recent first."""
    ordered = sorted(items, key=lambda item: (item.pinned, _news_date(item)), reverse=True)
    if max_items is not None:
        ordered = ordered[:max_items]
    return ordered


def format_authors(authors: List[str]) -> str:
    """Join author names, abbreviating long lists with "et al."."""
    if len(authors) <= MAX_AUTHORS_DISPLAYED:
        return ", ".join(authors)
    return f"{', '.join(authors[:MAX_AUTHORS_DISPLAYED])}, et al."
