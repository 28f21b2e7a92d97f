"""Core enumerations for the clock domain."""

from __future__ import annotations

from enum import IntEnum


class ClockMode(IntEnum):
    """Direction a single clock counts in."""

    COUNT_UP = 0
    COUNT_DOWN = 1


class ClockState(IntEnum):
    """Observable state of a single clock.

    ``RUNNING`` carries the instant its current run segment began, exposed
    as :attr:`Clock.started_at`.  ``FINISHED`` is terminal.
    """

    STOPPED = 0
    RUNNING = 1
    FINISHED = 2


class Player(IntEnum):
    """One side of a chess clock."""

    PLAYER1 = 0
    PLAYER2 = 1

    @property
    def index(self) -> int:
        return int(self.value)

    @property
    def other(self) -> Player:
        return Player(1 - self.value)

    def __str__(self) -> str:
        return f"Player {self.value + 1}"


class TimingMethod(IntEnum):
    """How the per-move increment is credited on a switch."""

    FISCHER = 0
    BRONSTEIN = 1

    @classmethod
    def from_name(cls, name: str) -> TimingMethod:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown timing method: {name!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


class Status(IntEnum):
    """Derived status of a two-player match."""

    STOPPED = 0
    RUNNING = 1
    FINISHED = 2

    def __str__(self) -> str:
        return self.name.capitalize()
