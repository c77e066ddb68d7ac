"""
Loader for the lab's static JSON content.

Each collection lives in its own file holding a JSON array. A malformed entry
is logged and skipped so one bad record never hides the rest of a collection;
a missing or unparseable file is an error for the caller.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from labsite.config.constants import MEDIA_FILE, NEWS_FILE, PUBLICATIONS_FILE
from labsite.config.settings import get_content_dir
from labsite.exceptions import ContentNotFoundError, ContentParseError, RecordValidationError
from labsite.models import MediaItem, NewsItem, Publication

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContentLoader:
    """Reads and caches content collections from a content directory."""

    def __init__(self, content_dir: Optional[Path] = None):
        self.content_dir = get_content_dir(content_dir)
        self._cache: Dict[str, List[Any]] = {}

    def _read_array(self, filename: str) -> List[Any]:
        path = self.content_dir / filename
        if not path.exists():
            raise ContentNotFoundError(path=str(path))
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ContentParseError(f"Invalid JSON: {e.msg}", path=str(path), line=e.lineno) from e
        except UnicodeDecodeError as e:
            raise ContentParseError(f"Not valid UTF-8: {e.reason}", path=str(path)) from e
        except OSError as e:
            raise ContentParseError(f"Could not read file: {e}", path=str(path)) from e
        if not isinstance(data, list):
            raise ContentParseError("Expected a JSON array", path=str(path))
        return data

    def _load(self, filename: str, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
        if filename in self._cache:
            return self._cache[filename]

        records: List[T] = []
        for position, entry in enumerate(self._read_array(filename)):
            if not isinstance(entry, dict):
                logger.warning(f"Skipping non-object entry #{position} in {filename}")
                continue
            try:
                records.append(factory(entry))
            except RecordValidationError as e:
                logger.warning(f"Skipping entry #{position} in {filename}: {e}")

        logger.info(f"Loaded {len(records)} records from {self.content_dir / filename}")
        self._cache[filename] = records
        return records

    def load_publications(self) -> List[Publication]:
        """Load publications.json."""
        return self._load(PUBLICATIONS_FILE, Publication.from_dict)

    def load_media(self) -> List[MediaItem]:
        """Load media.json."""
        return self._load(MEDIA_FILE, MediaItem.from_dict)

    def load_news(self) -> List[NewsItem]:
        """Load news.json."""
        return self._load(NEWS_FILE, NewsItem.from_dict)

    def clear_cache(self) -> None:
        self._cache.clear()
