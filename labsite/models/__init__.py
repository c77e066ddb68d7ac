"""Content record models."""

from .records import (
    MediaCategory,
    MediaItem,
    NewsItem,
    NewsType,
    Publication,
    PublicationLinks,
    PublicationType,
)

__all__ = [
    "MediaCategory",
    "MediaItem",
    "NewsItem",
    "NewsType",
    "Publication",
    "PublicationLinks",
    "PublicationType",
]
