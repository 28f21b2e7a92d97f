"""Core timing layer — pure clock logic with zero external dependencies.

Quick start::

    from chessclock.core import ChessClock, Rules, TimingMethod

    clock = ChessClock(Rules(300, 300, 2, timing_method=TimingMethod.BRONSTEIN))
    clock.start()
    ...
    clock.switch_player()
    clock.update()
    print(clock.read(), clock.status())
"""

from chessclock.core.chess_clock import ChessClock
from chessclock.core.clock import Clock, TimeSource
from chessclock.core.config import (
    DEFAULT_CONFIG,
    FIVE_SECONDS,
    ONE_HOUR,
    ONE_MINUTE,
    ONE_SECOND,
    TEN_MINUTES,
    ClockConfig,
)
from chessclock.core.display import format_debug, format_duration, round_half_up
from chessclock.core.enums import ClockMode, ClockState, Player, Status, TimingMethod
from chessclock.core.rules import Rules

__all__ = [
    # Enums
    "ClockMode",
    "ClockState",
    "Player",
    "Status",
    "TimingMethod",
    # Configuration
    "ClockConfig",
    "DEFAULT_CONFIG",
    "FIVE_SECONDS",
    "ONE_HOUR",
    "ONE_MINUTE",
    "ONE_SECOND",
    "TEN_MINUTES",
    # Domain objects
    "ChessClock",
    "Clock",
    "Rules",
    "TimeSource",
    # Display
    "format_debug",
    "format_duration",
    "round_half_up",
]
