"""Single start/stop timer counting up or down."""

from __future__ import annotations

import time
from collections.abc import Callable

from chessclock.core.config import DEFAULT_CONFIG, ClockConfig
from chessclock.core.enums import ClockMode, ClockState

TimeSource = Callable[[], float]


class Clock:
    """A timer that can be started, stopped, adjusted and finished.

    Keeps the time banked from previous run segments plus the instant the
    current segment began; there is no background ticking.  Every reading is
    derived from the time source on demand.

    Reads come in two tiers:

    * :meth:`read` / :attr:`state` are pure projections.  A count-down clock
      that has run out reads ``0.0`` but may still report ``RUNNING``.
    * :meth:`read_and_update` / :meth:`state_and_update` reconcile first,
      stopping a count-down clock that reached zero.
    """

    __slots__ = ("_already_elapsed", "_state", "_started_at", "_mode", "_now")

    def __init__(
        self,
        mode: ClockMode = ClockMode.COUNT_UP,
        start: float | None = None,
        *,
        config: ClockConfig = DEFAULT_CONFIG,
        time_source: TimeSource = time.monotonic,
    ) -> None:
        if start is None:
            start = config.countdown_default if mode == ClockMode.COUNT_DOWN else 0.0
        if start < 0:
            raise ValueError(f"Clock start must be non-negative, got {start}")
        self._already_elapsed: float = float(start)
        self._state = ClockState.STOPPED
        self._started_at: float | None = None
        self._mode = mode
        self._now = time_source

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def mode(self) -> ClockMode:
        return self._mode

    @property
    def state(self) -> ClockState:
        """Last known state, possibly stale for an expired count-down."""
        return self._state

    @property
    def started_at(self) -> float | None:
        """Instant the current run segment began, ``None`` unless running."""
        return self._started_at

    # ── Reads ────────────────────────────────────────────────────────────

    def read(self) -> float:
        """Current elapsed (count-up) or remaining (count-down) seconds."""
        if self._state != ClockState.RUNNING:
            return self._already_elapsed
        segment = self.read_running()
        if self._mode == ClockMode.COUNT_UP:
            return self._already_elapsed + segment
        return max(0.0, self._already_elapsed - segment)

    def read_and_update(self) -> float:
        """Like :meth:`read`, but stop a count-down clock that hit zero."""
        value = self.read()
        if (
            self._state == ClockState.RUNNING
            and self._mode == ClockMode.COUNT_DOWN
            and value <= 0.0
        ):
            self._already_elapsed = 0.0
            self._state = ClockState.STOPPED
            self._started_at = None
        return value

    def read_running(self) -> float:
        """Seconds since the current run segment began (0 when not running)."""
        if self._state != ClockState.RUNNING or self._started_at is None:
            return 0.0
        return max(0.0, self._now() - self._started_at)

    def state_and_update(self) -> ClockState:
        """Authoritative state: reconcile, then report."""
        self.read_and_update()
        return self._state

    # ── Commands ─────────────────────────────────────────────────────────

    def start(self) -> None:
        if self._state == ClockState.STOPPED:
            self._state = ClockState.RUNNING
            self._started_at = self._now()

    def stop(self) -> None:
        if self._state == ClockState.RUNNING:
            self._already_elapsed = self.read()
            self._state = ClockState.STOPPED
            self._started_at = None

    def reset(self, start: float | None = None) -> None:
        """Set the banked time to *start* (or zero) and stop the clock."""
        self._already_elapsed = max(0.0, start or 0.0)
        self._state = ClockState.STOPPED
        self._started_at = None

    def zero(self) -> None:
        self.reset(0.0)

    def add(self, seconds: float) -> None:
        """Bank extra time, flooring at zero.

        Legal in any state; the current run segment is untouched.
        """
        self._already_elapsed = max(0.0, self._already_elapsed + seconds)

    def subtract(self, seconds: float) -> None:
        """Remove time, flooring at zero."""
        if self._state == ClockState.RUNNING:
            total = self.read()
            self.reset(max(0.0, total - seconds))
            if self._already_elapsed > 0.0:
                self.start()
        else:
            self._already_elapsed = max(0.0, self._already_elapsed - seconds)

    def finish(self) -> None:
        """Stop the clock for good.  No later command makes it run again."""
        self.stop()
        self._state = ClockState.FINISHED

    def __repr__(self) -> str:
        return (
            f"Clock(mode={self._mode.name}, state={self._state.name}, "
            f"value={self.read():.3f})"
        )
