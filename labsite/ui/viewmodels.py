"""
ViewModels for the publication and gallery views.

These are lightweight data transfer objects that contain all the data
needed to render the UI, with display formatting already applied.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from labsite.services.filter_engine import ALL, FilterOption
from labsite.ui.lightbox import LightboxState


@dataclass
class PublicationListItem:
    """ViewModel for a single publication in the list."""

    id: str
    title: str
    authors_display: str
    venue: str
    year: int
    type_label: str
    type_badge: str  # Rich markup
    tags: List[str]
    links: List[str] = field(default_factory=list)


@dataclass
class PublicationListVM:
    """ViewModel for the filtered publication list."""

    items: List[PublicationListItem] = field(default_factory=list)
    options: Dict[str, List[FilterOption]] = field(default_factory=dict)
    query: str = ""
    selections: Dict[str, str] = field(default_factory=dict)
    total_count: int = 0
    filtered_count: int = 0
    has_active_filters: bool = False
    status_text: str = ""

    def selection(self, name: str) -> str:
        return self.selections.get(name, ALL)


@dataclass
class GalleryItemVM:
    """ViewModel for one gallery image."""

    id: str
    src: str
    alt: str
    caption: str
    category: str
    category_badge: str  # Rich markup
    event: Optional[str] = None
    date_display: Optional[str] = None


@dataclass
class GalleryVM:
    """ViewModel for the gallery grid and its lightbox."""

    items: List[GalleryItemVM] = field(default_factory=list)
    categories: List[FilterOption] = field(default_factory=list)
    selected_category: str = ALL
    total_count: int = 0
    filtered_count: int = 0
    status_text: str = ""
    empty_message: str = ""
    lightbox: LightboxState = field(default_factory=LightboxState)
    current_item: Optional[GalleryItemVM] = None
    position_label: str = ""
