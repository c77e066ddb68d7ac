"""Filtering services for content collections."""

from .filter_engine import (
    ALL,
    FieldKind,
    FilterField,
    FilterOption,
    FilterState,
    ListFilterEngine,
    ListViewConfig,
    build_filter_options,
    compute_derived_view,
    extract_distinct_values,
)
from .views import GALLERY_VIEW, PUBLICATION_VIEW, format_authors, order_news

__all__ = [
    "ALL",
    "FieldKind",
    "FilterField",
    "FilterOption",
    "FilterState",
    "ListFilterEngine",
    "ListViewConfig",
    "build_filter_options",
    "compute_derived_view",
    "extract_distinct_values",
    "GALLERY_VIEW",
    "PUBLICATION_VIEW",
    "format_authors",
    "order_news",
]
