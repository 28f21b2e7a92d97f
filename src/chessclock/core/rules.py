"""Match rules: starting times, increment, starter and timing method."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessclock.core.config import FIVE_SECONDS, ONE_MINUTE, TEN_MINUTES
from chessclock.core.enums import Player, TimingMethod


@dataclass
class Rules:
    """Time control for one match.

    Mutable while the match is being configured; a running
    :class:`~chessclock.core.chess_clock.ChessClock` keeps its own copy.

    Args:
        player1_time: Starting seconds for Player 1.
        player2_time: Starting seconds for Player 2.
        increment: Seconds credited per move.
        starter: Player whose clock runs first.
        timing_method: Fischer or Bronstein increment.
    """

    player1_time: float = TEN_MINUTES
    player2_time: float = TEN_MINUTES
    increment: float = 0.0
    starter: Player = Player.PLAYER1
    timing_method: TimingMethod = TimingMethod.FISCHER

    def __post_init__(self) -> None:
        for name in ("player1_time", "player2_time", "increment"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    # Common presets
    @classmethod
    def default(cls) -> Rules:
        return cls(TEN_MINUTES, TEN_MINUTES, FIVE_SECONDS)

    @classmethod
    def bullet_1m(cls) -> Rules:
        return cls(ONE_MINUTE, ONE_MINUTE, 0)

    @classmethod
    def blitz_3m2s(cls) -> Rules:
        return cls(3 * ONE_MINUTE, 3 * ONE_MINUTE, 2)

    @classmethod
    def blitz_5m3s(cls) -> Rules:
        return cls(5 * ONE_MINUTE, 5 * ONE_MINUTE, 3)

    @classmethod
    def rapid_10m(cls) -> Rules:
        return cls(TEN_MINUTES, TEN_MINUTES, 0)

    @classmethod
    def rapid_15m10s(cls) -> Rules:
        return cls(15 * ONE_MINUTE, 15 * ONE_MINUTE, 10)

    @classmethod
    def classical_30m(cls) -> Rules:
        return cls(30 * ONE_MINUTE, 30 * ONE_MINUTE, 0)

    def time_for(self, player: Player) -> float:
        if player == Player.PLAYER1:
            return self.player1_time
        return self.player2_time

    def set_time(self, player: Player, seconds: float) -> None:
        if player == Player.PLAYER1:
            self.player1_time = seconds
        else:
            self.player2_time = seconds

    def copy(self) -> Rules:
        return replace(self)

    def describe(self) -> str:
        """Short label such as ``"10+5 Fischer"``."""
        p1 = f"{self.player1_time / ONE_MINUTE:g}"
        p2 = f"{self.player2_time / ONE_MINUTE:g}"
        base = p1 if p1 == p2 else f"{p1}/{p2}"
        return f"{base}+{self.increment:g} {self.timing_method}"
