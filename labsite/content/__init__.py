"""Static content provider."""

from .loader import ContentLoader

__all__ = ["ContentLoader"]
