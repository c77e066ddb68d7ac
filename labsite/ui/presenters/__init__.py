"""Presenters for the labsite TUI."""

from .gallery_presenter import GalleryPresenter
from .publications_presenter import PublicationsPresenter

__all__ = ["GalleryPresenter", "PublicationsPresenter"]
