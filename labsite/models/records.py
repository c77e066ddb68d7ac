"""
Content records for the lab site.

Records are loaded from the JSON content files and are read-only for the
rest of a session. Field names follow Python conventions; the JSON files use
the camelCase keys of the published site, which ``from_dict`` maps.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from labsite.exceptions import RecordValidationError


class PublicationType(Enum):
    """Closed set of publication kinds."""

    CONFERENCE = "conference"
    JOURNAL = "journal"
    WORKSHOP = "workshop"
    PREPRINT = "preprint"
    THESIS = "thesis"


class MediaCategory(Enum):
    """Closed set of gallery categories."""

    EVENT = "event"
    TALK = "talk"
    GROUP = "group"
    LAB = "lab"
    CONFERENCE = "conference"
    AWARD = "award"


class NewsType(Enum):
    """Closed set of news item kinds."""

    PUBLICATION = "publication"
    AWARD = "award"
    EVENT = "event"
    ANNOUNCEMENT = "announcement"
    TALK = "talk"
    MEDIA = "media"


def _require(data: Dict[str, Any], key: str, record_id: Optional[str] = None) -> Any:
    if key not in data or data[key] is None:
        raise RecordValidationError(
            f"Missing required field '{key}'", record_id=record_id, field=key
        )
    return data[key]


def _enum_value(enum_cls, raw: Any, key: str, record_id: Optional[str]):
    try:
        return enum_cls(raw)
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)
        raise RecordValidationError(
            f"Invalid {key} {raw!r} (expected one of: {allowed})",
            record_id=record_id,
            field=key,
        ) from e


def _string_list(raw: Any, key: str, record_id: Optional[str]) -> List[str]:
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        raise RecordValidationError(
            f"{key} must be a string or a list, got {type(raw).__name__}",
            record_id=record_id,
            field=key,
        )
    return [str(item) for item in raw]


@dataclass(frozen=True)
class PublicationLinks:
    """External links attached to a publication."""

    pdf: Optional[str] = None
    arxiv: Optional[str] = None
    google_scholar: Optional[str] = None
    doi: Optional[str] = None
    code: Optional[str] = None
    slides: Optional[str] = None
    video: Optional[str] = None
    project: Optional[str] = None

    _JSON_KEYS = {"google_scholar": "googleScholar"}

    @classmethod
    def from_dict(
        cls, data: Optional[Dict[str, Any]], record_id: Optional[str] = None
    ) -> "PublicationLinks":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise RecordValidationError(
                f"links must be an object, got {type(data).__name__}",
                record_id=record_id,
                field="links",
            )
        kwargs = {}
        for name in ("pdf", "arxiv", "google_scholar", "doi", "code", "slides", "video", "project"):
            key = cls._JSON_KEYS.get(name, name)
            value = data.get(key, data.get(name))
            if value:
                kwargs[name] = str(value)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, str]:
        return {
            self._JSON_KEYS.get(name, name): value
            for name, value in asdict(self).items()
            if value
        }

    def available(self) -> List[str]:
        """Names of the links that are set, in display order."""
        return [name for name, value in asdict(self).items() if value]


@dataclass(frozen=True)
class Publication:
    """An academic paper, article or thesis."""

    id: str
    title: str
    authors: List[str]
    venue: str
    year: int
    type: PublicationType
    abstract: str = ""
    tags: List[str] = field(default_factory=list)
    links: PublicationLinks = field(default_factory=PublicationLinks)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Publication":
        """Build a Publication from a content-file entry.

        Raises:
            RecordValidationError: If a required field is missing, the year is
                not a 4-digit integer, or the type is outside the closed set.
        """
        record_id = str(_require(data, "id"))
        raw_year = _require(data, "year", record_id)
        try:
            year = int(raw_year)
        except (TypeError, ValueError) as e:
            raise RecordValidationError(
                f"Year must be an integer, got {raw_year!r}", record_id=record_id, field="year"
            ) from e
        if not 1000 <= year <= 9999:
            raise RecordValidationError(
                f"Year must have 4 digits, got {year}", record_id=record_id, field="year"
            )

        return cls(
            id=record_id,
            title=str(_require(data, "title", record_id)),
            authors=_string_list(data.get("authors"), "authors", record_id),
            venue=str(data.get("venue") or ""),
            year=year,
            type=_enum_value(PublicationType, _require(data, "type", record_id), "type", record_id),
            abstract=str(data.get("abstract") or ""),
            tags=_string_list(data.get("tags"), "tags", record_id),
            links=PublicationLinks.from_dict(data.get("links"), record_id),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "authors": list(self.authors),
            "venue": self.venue,
            "year": self.year,
            "abstract": self.abstract,
            "tags": list(self.tags),
            "links": self.links.to_dict(),
            "type": self.type.value,
        }


@dataclass(frozen=True)
class MediaItem:
    """A gallery image with its caption."""

    id: str
    src: str
    alt: str
    caption: str
    category: MediaCategory
    date: Optional[str] = None
    event: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaItem":
        record_id = str(_require(data, "id"))
        return cls(
            id=record_id,
            src=str(_require(data, "src", record_id)),
            alt=str(data.get("alt") or ""),
            caption=str(data.get("caption") or ""),
            category=_enum_value(
                MediaCategory, _require(data, "category", record_id), "category", record_id
            ),
            date=data.get("date") or None,
            event=data.get("event") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "src": self.src,
            "alt": self.alt,
            "caption": self.caption,
            "category": self.category.value,
        }
        if self.date:
            result["date"] = self.date
        if self.event:
            result["event"] = self.event
        return result


@dataclass(frozen=True)
class NewsItem:
    """A dated news entry; pinned entries are listed first."""

    id: str
    date: str
    title: str
    description: str
    type: NewsType
    link: Optional[str] = None
    pinned: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewsItem":
        record_id = str(_require(data, "id"))
        pinned = data.get("pinned")
        if pinned is not None and not isinstance(pinned, bool):
            raise RecordValidationError(
                f"pinned must be true or false, got {pinned!r}",
                record_id=record_id,
                field="pinned",
            )
        return cls(
            id=record_id,
            date=str(_require(data, "date", record_id)),
            title=str(_require(data, "title", record_id)),
            description=str(data.get("description") or ""),
            type=_enum_value(NewsType, _require(data, "type", record_id), "type", record_id),
            link=data.get("link") or None,
            pinned=bool(pinned),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "pinned": self.pinned,
        }
        if self.link:
            result["link"] = self.link
        return result
