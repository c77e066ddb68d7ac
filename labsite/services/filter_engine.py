"""
Client-side list filtering for content collections.

A view combines a free-text query with zero or more discrete field
selections. ``compute_derived_view`` turns a source collection and a
``FilterState`` into the ordered list of records to display; it is a pure
function, so the presenters recompute it on every state change instead of
tracking incremental updates.

Records can be dataclass instances or plain mappings. A record that lacks a
field simply fails the predicates that reference that field.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

# Sentinel selection meaning "no constraint on this field"
ALL = "all"

FieldSelector = Union[str, Callable[[Any], Any]]

_MISSING = object()


class FieldKind(Enum):
    """How a filter field's distinct values are ordered in option lists."""

    ORDINAL = "ordinal"  # Sortable, newest/largest first (e.g. year)
    NOMINAL = "nominal"  # Unordered labels, alphabetical (e.g. type, tag)


@dataclass(frozen=True)
class FilterOption:
    """One entry of a filter dropdown."""

    value: str
    label: str


@dataclass(frozen=True)
class FilterField:
    """A discrete filter dimension of a view."""

    name: str
    label: str
    all_label: str = "All"
    kind: FieldKind = FieldKind.NOMINAL
    selector: Optional[FieldSelector] = None
    capitalize_labels: bool = False

    @property
    def field_selector(self) -> FieldSelector:
        return self.selector if self.selector is not None else self.name


@dataclass(frozen=True)
class ListViewConfig:
    """Which fields a view searches, filters and sorts on."""

    search_fields: Tuple[FieldSelector, ...] = ()
    filter_fields: Tuple[FilterField, ...] = ()
    sort_key: Optional[FieldSelector] = None
    sort_descending: bool = False

    def filter_field(self, name: str) -> Optional[FilterField]:
        for filter_field in self.filter_fields:
            if filter_field.name == name:
                return filter_field
        return None

    def selector_for(self, name: str) -> FieldSelector:
        filter_field = self.filter_field(name)
        return filter_field.field_selector if filter_field else name


@dataclass(frozen=True)
class FilterState:
    """Active predicate values for one view session.

    A selection that is absent or equal to ``ALL`` places no constraint on
    its field; an empty query matches everything.
    """

    query: str = ""
    selections: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        active = {
            name: str(value)
            for name, value in dict(self.selections).items()
            if value not in (None, "", ALL)
        }
        object.__setattr__(self, "selections", active)

    def selection(self, name: str) -> str:
        return self.selections.get(name, ALL)

    def with_query(self, query: str) -> "FilterState":
        return FilterState(query=query, selections=self.selections)

    def with_selection(self, name: str, value: Optional[str]) -> "FilterState":
        selections = dict(self.selections)
        selections[name] = value if value is not None else ALL
        return FilterState(query=self.query, selections=selections)

    def cleared(self) -> "FilterState":
        return FilterState()

    @property
    def active_predicate_count(self) -> int:
        return (1 if self.query else 0) + len(self.selections)

    @property
    def has_active_filters(self) -> bool:
        return self.active_predicate_count > 0


# =============================================================================
# Field access
# =============================================================================


def get_field(record: Any, selector: FieldSelector) -> Any:
    """Read a field from a record, returning ``None`` when it is absent."""
    if callable(selector):
        try:
            return selector(record)
        except (AttributeError, KeyError, TypeError):
            return None
    if isinstance(record, Mapping):
        return record.get(selector)
    return getattr(record, selector, None)


def _as_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def _field_texts(record: Any, selector: FieldSelector) -> Optional[List[str]]:
    """Field value(s) as strings; ``None`` when the field is missing."""
    value = get_field(record, selector)
    if value is None:
        return None
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_as_text(item) for item in value if item is not None]
    return [_as_text(value)]


# =============================================================================
# Predicates
# =============================================================================


def matches_query(record: Any, query: str, search_fields: Sequence[FieldSelector]) -> bool:
    """Case-insensitive substring match against any of the search fields."""
    if not query:
        return True
    needle = query.lower()
    for selector in search_fields:
        texts = _field_texts(record, selector)
        if texts and any(needle in text.lower() for text in texts):
            return True
    return False


def matches_selection(record: Any, selector: FieldSelector, selected: str) -> bool:
    """Exact match for scalar fields, containment for array fields."""
    if selected == ALL:
        return True
    texts = _field_texts(record, selector)
    if texts is None:
        return False
    return selected in texts


def _sort_records(records: List[Any], config: ListViewConfig) -> List[Any]:
    if config.sort_key is None:
        return records

    # Records missing the key sort after the rest in either direction
    present, missing = (1, 0) if config.sort_descending else (0, 1)

    def key(record: Any) -> Tuple[int, int, Any]:
        value = get_field(record, config.sort_key)
        if value is None:
            return (missing, 0, 0)
        if isinstance(value, Enum):
            value = value.value
        # Numbers rank before text; mixed types stay comparable
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (present, 0, value)
        return (present, 1, str(value))

    # sorted() is stable, including with reverse=True
    return sorted(records, key=key, reverse=config.sort_descending)


def compute_derived_view(
    source: Iterable[Any],
    state: FilterState,
    config: Optional[ListViewConfig] = None,
) -> List[Any]:
    """
    Produce the ordered records of ``source`` that satisfy ``state``.

    Args:
        source: The full collection; never mutated
        state: Active query and selections
        config: Search fields, filter fields and canonical sort order

    Returns:
        A new list. Empty when nothing matches or the source is empty.
    """
    config = config or ListViewConfig()
    selections = [
        (config.selector_for(name), value) for name, value in state.selections.items()
    ]

    result = [
        record
        for record in source
        if matches_query(record, state.query, config.search_fields)
        and all(matches_selection(record, selector, value) for selector, value in selections)
    ]
    return _sort_records(result, config)


# =============================================================================
# Option lists
# =============================================================================


def extract_distinct_values(
    source: Iterable[Any],
    field_selector: FieldSelector,
    kind: FieldKind = FieldKind.NOMINAL,
) -> List[str]:
    """
    Distinct values of a field, for populating a filter's option list.

    Array fields are flattened. Ordinal fields sort descending (numerically
    when every value is a number), nominal fields ascending. The result always
    starts with ``ALL``.
    """
    seen: Dict[str, Any] = {}
    for record in source:
        value = get_field(record, field_selector)
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
        for item in items:
            if item is None:
                continue
            raw = item.value if isinstance(item, Enum) else item
            text = str(raw)
            if text == ALL:
                continue
            seen.setdefault(text, raw)

    if kind is FieldKind.ORDINAL:
        numeric = all(
            isinstance(raw, (int, float)) and not isinstance(raw, bool) for raw in seen.values()
        )
        if numeric:
            ordered = [text for text, _ in sorted(seen.items(), key=lambda kv: kv[1], reverse=True)]
        else:
            ordered = sorted(seen, reverse=True)
    else:
        ordered = sorted(seen)

    return [ALL, *ordered]


def _option_label(value: str, filter_field: FilterField) -> str:
    if filter_field.capitalize_labels and value:
        return value[0].upper() + value[1:]
    return value


def build_filter_options(source: Iterable[Any], filter_field: FilterField) -> List[FilterOption]:
    """Option list for one filter field, led by the field's "all" entry."""
    values = extract_distinct_values(source, filter_field.field_selector, filter_field.kind)
    return [FilterOption(ALL, filter_field.all_label)] + [
        FilterOption(value, _option_label(value, filter_field)) for value in values[1:]
    ]


class ListFilterEngine:
    """A source collection bound to its view configuration."""

    def __init__(self, source: Iterable[Any], config: ListViewConfig):
        self._source: Tuple[Any, ...] = tuple(source)
        self.config = config
        self._options: Optional[Dict[str, List[FilterOption]]] = None

    @property
    def source(self) -> Tuple[Any, ...]:
        return self._source

    @property
    def total(self) -> int:
        return len(self._source)

    def derive(self, state: FilterState) -> List[Any]:
        """Records matching ``state`` in canonical order."""
        records = compute_derived_view(self._source, state, self.config)
        logger.debug(
            f"Derived {len(records)}/{len(self._source)} records "
            f"(query={state.query!r}, selections={dict(state.selections)})"
        )
        return records

    def options(self) -> Dict[str, List[FilterOption]]:
        """Option lists for every filter field, computed once."""
        if self._options is None:
            self._options = {
                filter_field.name: build_filter_options(self._source, filter_field)
                for filter_field in self.config.filter_fields
            }
        return self._options
