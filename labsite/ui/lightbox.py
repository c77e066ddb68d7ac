"""
Lightbox navigation state.

The lightbox is either closed or open on one item of the current gallery
view. ``transition`` is the pure state function; ``LightboxNavigator`` wraps
it and pairs the open/close edges with a scroll lock on the hosting screen.

Misuse is absorbed rather than raised: an out-of-range open index is
clamped, and navigating an empty or single-item collection does nothing.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class LightboxAction(Enum):
    OPEN = "open"
    CLOSE = "close"
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class LightboxState:
    """Snapshot of the lightbox.

    Invariant: when ``image_count > 0``, ``0 <= current_index < image_count``.
    """

    is_open: bool = False
    current_index: int = 0
    image_count: int = 0


def clamp_index(index: int, image_count: int) -> int:
    if image_count <= 0:
        return 0
    return max(0, min(index, image_count - 1))


def transition(
    state: LightboxState, action: LightboxAction, index: Optional[int] = None
) -> LightboxState:
    """Apply one action to a lightbox state and return the new state."""
    count = state.image_count

    if action is LightboxAction.OPEN:
        if count <= 0:
            return state
        target = state.current_index if index is None else index
        return replace(state, is_open=True, current_index=clamp_index(target, count))

    if action is LightboxAction.CLOSE:
        return replace(state, is_open=False)

    if not state.is_open or count <= 1:
        return state

    if action is LightboxAction.NEXT:
        return replace(state, current_index=(state.current_index + 1) % count)

    if action is LightboxAction.PREVIOUS:
        return replace(state, current_index=(state.current_index - 1 + count) % count)

    return state


class ScrollLock(Protocol):
    """Suspends background scrolling while the lightbox is open."""

    def acquire(self) -> None: ...

    def release(self) -> None: ...


class FlagScrollLock:
    """Single in-memory flag; the last transition wins."""

    def __init__(self) -> None:
        self.locked = False

    def acquire(self) -> None:
        self.locked = True

    def release(self) -> None:
        self.locked = False


# Key names as delivered by Textual
CLOSE_KEYS = frozenset({"escape"})
PREVIOUS_KEYS = frozenset({"left"})
NEXT_KEYS = frozenset({"right"})


class LightboxNavigator:
    """Stateful lightbox controller for one gallery view."""

    def __init__(self, image_count: int = 0, scroll_lock: Optional[ScrollLock] = None):
        self._state = LightboxState(image_count=max(image_count, 0))
        self.scroll_lock = scroll_lock

    @property
    def state(self) -> LightboxState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def image_count(self) -> int:
        return self._state.image_count

    @property
    def has_multiple(self) -> bool:
        return self._state.image_count > 1

    @property
    def position_label(self) -> str:
        """Human-readable position, e.g. "3 / 8"."""
        if self._state.image_count == 0:
            return ""
        return f"{self._state.current_index + 1} / {self._state.image_count}"

    def _apply(self, action: LightboxAction, index: Optional[int] = None) -> LightboxState:
        before = self._state
        after = transition(before, action, index)
        self._state = after

        if self.scroll_lock is not None:
            if not before.is_open and after.is_open:
                self.scroll_lock.acquire()
            elif before.is_open and not after.is_open:
                self.scroll_lock.release()

        if after != before:
            logger.debug(f"Lightbox {action.value}: {before} -> {after}")
        return after

    def open(self, index: int) -> LightboxState:
        if index != clamp_index(index, self._state.image_count):
            logger.warning(
                f"Lightbox index {index} out of range for {self._state.image_count} items; clamping"
            )
        return self._apply(LightboxAction.OPEN, index)

    def close(self) -> LightboxState:
        return self._apply(LightboxAction.CLOSE)

    def next(self) -> LightboxState:
        return self._apply(LightboxAction.NEXT)

    def previous(self) -> LightboxState:
        return self._apply(LightboxAction.PREVIOUS)

    def handle_key(self, key: str) -> bool:
        """Map a key press onto a transition. Returns True if the key was used."""
        if not self._state.is_open:
            return False
        if key in CLOSE_KEYS:
            self.close()
            return True
        if not self.has_multiple:
            return False
        if key in PREVIOUS_KEYS:
            self.previous()
            return True
        if key in NEXT_KEYS:
            self.next()
            return True
        return False

    def set_image_count(self, image_count: int) -> LightboxState:
        """Follow a change of the backing collection."""
        image_count = max(image_count, 0)
        if image_count == 0:
            self._apply(LightboxAction.CLOSE)
            self._state = LightboxState(image_count=0)
            return self._state
        self._state = replace(
            self._state,
            image_count=image_count,
            current_index=clamp_index(self._state.current_index, image_count),
        )
        return self._state

    def dispose(self) -> None:
        """Release the scroll lock if the host goes away while open."""
        if self._state.is_open:
            self.close()
