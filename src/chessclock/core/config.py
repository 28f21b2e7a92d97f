"""Named durations and injectable clock configuration."""

from __future__ import annotations

from dataclasses import dataclass

ONE_SECOND: float = 1.0
FIVE_SECONDS: float = 5.0
ONE_MINUTE: float = 60.0
TEN_MINUTES: float = 10 * ONE_MINUTE
ONE_HOUR: float = 60 * ONE_MINUTE


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """Default values handed to clocks and their drivers.

    Args:
        countdown_default: Seconds a count-down clock starts from when no
            explicit start value is given.
        tick_interval_ms: How often a driver polls the clock for display.
        low_time_threshold: Remaining seconds below which the active
            player's display warns.
    """

    countdown_default: float = TEN_MINUTES
    tick_interval_ms: int = 100
    low_time_threshold: float = 30.0


DEFAULT_CONFIG = ClockConfig()
