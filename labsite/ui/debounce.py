"""
Debounced text input.

Turns every keystroke of a search box into at most one committed query per
quiet period. The controller does not own a clock: it is handed a scheduler
with the same shape as Textual's ``set_timer`` (``delay_seconds, callback``
returning a timer with ``stop()``), so screens pass ``self.set_timer`` and
tests pass a fake clock.
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

from labsite.config.constants import DEFAULT_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class StoppableTimer(Protocol):
    def stop(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], StoppableTimer]


class _LoopTimer:
    """Adapts an asyncio TimerHandle to the ``stop()`` interface."""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def stop(self) -> None:
        self._handle.cancel()


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> StoppableTimer:
    """Schedule ``callback`` on the running event loop."""
    loop = asyncio.get_running_loop()
    return _LoopTimer(loop.call_later(delay, callback))


class DebouncedInputController:
    """
    Rate-limits raw input values into committed values.

    A burst of changes closer together than ``interval_ms`` produces a single
    commit carrying the last value, ``interval_ms`` after the last change.
    ``clear()`` bypasses the delay.
    """

    def __init__(
        self,
        on_commit: Callable[[str], None],
        interval_ms: int = DEFAULT_DEBOUNCE_MS,
        schedule: Optional[Scheduler] = None,
        initial_value: str = "",
    ):
        self.on_commit = on_commit
        self.interval_ms = interval_ms
        self._schedule = schedule or asyncio_scheduler
        self._raw_value = initial_value
        self._committed_value = initial_value
        self._timer: Optional[StoppableTimer] = None
        # Bumped on every change so a timer that fires after being
        # superseded can recognise itself as stale.
        self._generation = 0

    @property
    def raw_value(self) -> str:
        return self._raw_value

    @property
    def committed_value(self) -> str:
        return self._committed_value

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    def on_raw_change(self, value: str) -> None:
        """Record a new raw value and restart the quiet period."""
        self._raw_value = value
        self._invalidate()

        if self.interval_ms <= 0:
            self._commit(value)
            return

        generation = self._generation

        def fire() -> None:
            if generation != self._generation:
                return
            self._timer = None
            self._commit(value)

        self._timer = self._schedule(self.interval_ms / 1000, fire)

    def clear(self) -> None:
        """Reset to an empty query and commit it immediately."""
        self._raw_value = ""
        self._invalidate()
        self._commit("")

    def flush(self) -> bool:
        """Commit the pending raw value now. Returns False if nothing was pending."""
        if self._timer is None:
            return False
        self._invalidate()
        self._commit(self._raw_value)
        return True

    def cancel(self) -> None:
        """Drop any pending commit."""
        self._invalidate()

    def _invalidate(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _commit(self, value: str) -> None:
        self._committed_value = value
        logger.debug(f"Committed query {value!r}")
        self.on_commit(value)
