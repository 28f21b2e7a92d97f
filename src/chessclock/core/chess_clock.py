"""ChessClock — two count-down clocks with exactly one active player.

The driver polls :meth:`ChessClock.read` / :meth:`ChessClock.status` on a
fixed tick and forwards discrete events (start/stop, switch, finish) as
method calls.  Nothing here spawns timers or threads.
"""

from __future__ import annotations

import logging
import time

from chessclock.core.clock import Clock, TimeSource
from chessclock.core.config import DEFAULT_CONFIG, ClockConfig
from chessclock.core.display import format_debug
from chessclock.core.enums import ClockMode, ClockState, Player, Status, TimingMethod
from chessclock.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


class ChessClock:
    """Coordinates one :class:`Clock` per player under a set of :class:`Rules`."""

    __slots__ = ("_clocks", "_active", "_rules", "_config")

    def __init__(
        self,
        rules: Rules,
        *,
        config: ClockConfig = DEFAULT_CONFIG,
        time_source: TimeSource = time.monotonic,
    ) -> None:
        self._rules = rules.copy()
        self._config = config
        self._clocks: tuple[Clock, Clock] = (
            Clock(
                ClockMode.COUNT_DOWN,
                self._rules.player1_time,
                config=config,
                time_source=time_source,
            ),
            Clock(
                ClockMode.COUNT_DOWN,
                self._rules.player2_time,
                config=config,
                time_source=time_source,
            ),
        )
        self._active = self._rules.starter

    @classmethod
    def default(cls, *, time_source: TimeSource = time.monotonic) -> ChessClock:
        return cls(Rules.default(), time_source=time_source)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def rules(self) -> Rules:
        """A copy of the rules this match was created with."""
        return self._rules.copy()

    @property
    def config(self) -> ClockConfig:
        return self._config

    def clock(self, player: Player) -> Clock:
        return self._clocks[player.index]

    def active_player(self) -> Player:
        return self._active

    # ── Reads ────────────────────────────────────────────────────────────

    def read(self) -> tuple[float, float]:
        """Remaining seconds as ``(player1, player2)``; does not mutate."""
        return (
            self._clocks[Player.PLAYER1.index].read(),
            self._clocks[Player.PLAYER2.index].read(),
        )

    def update(self) -> None:
        """Reconcile both clocks; finish the match if a flag has fallen."""
        for clock in self._clocks:
            clock.read_and_update()
        if self._flag_fallen() and not self._both_finished():
            _LOGGER.info("Flag fell for %s, match finished", self._flagged_player())
            self.finish()

    def status(self) -> Status:
        t1, t2 = self.read()
        if t1 <= 0.0 or t2 <= 0.0:
            return Status.FINISHED
        if self._both_finished():
            return Status.FINISHED
        s1, s2 = (clock.state for clock in self._clocks)
        if s1 == ClockState.STOPPED and s2 == ClockState.STOPPED:
            return Status.STOPPED
        return Status.RUNNING

    # ── Commands ─────────────────────────────────────────────────────────

    def start(self) -> None:
        self._current().start()
        _LOGGER.debug("Started clock for %s", self._active)

    def stop(self) -> None:
        self._current().stop()
        _LOGGER.debug("Stopped clock for %s", self._active)

    def switch_player(self) -> None:
        """Hand the move to the other player, crediting the increment."""
        self.update()

        current = self._current()
        new = self._active.other
        state = current.state

        if state == ClockState.RUNNING:
            running_time = current.read_running()
            current.stop()
            credited = self._increment_for(running_time)
            current.add(credited)
            self._clocks[new.index].start()
            _LOGGER.debug(
                "%s moved after %s, credited %s",
                self._active,
                format_debug(running_time),
                format_debug(credited),
            )
            self._active = new
        elif state == ClockState.FINISHED:
            return
        else:
            self._active = new

    def finish(self) -> None:
        for clock in self._clocks:
            clock.finish()
        _LOGGER.info("Match finished at %s", self._describe_times())

    # ── Internal ─────────────────────────────────────────────────────────

    def _current(self) -> Clock:
        return self._clocks[self._active.index]

    def _increment_for(self, running_time: float) -> float:
        increment = self._rules.increment
        if self._rules.timing_method == TimingMethod.BRONSTEIN:
            return min(running_time, increment)
        return increment

    def _both_finished(self) -> bool:
        return all(clock.state == ClockState.FINISHED for clock in self._clocks)

    def _flag_fallen(self) -> bool:
        return any(clock.read() <= 0.0 for clock in self._clocks)

    def _flagged_player(self) -> Player | None:
        for player in Player:
            if self._clocks[player.index].read() <= 0.0:
                return player
        return None

    def _describe_times(self) -> str:
        t1, t2 = self.read()
        return f"{Player.PLAYER1}={format_debug(t1)}, {Player.PLAYER2}={format_debug(t2)}"

    def __repr__(self) -> str:
        return (
            f"ChessClock(active={self._active.name}, status={self.status().name}, "
            f"times={self._describe_times()})"
        )
