"""TimerWindow — a single count-up or count-down timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from chessclock.core.clock import Clock
from chessclock.core.config import ONE_HOUR, ONE_MINUTE, ONE_SECOND
from chessclock.core.display import format_duration
from chessclock.core.enums import ClockMode, ClockState

_LOGGER = logging.getLogger(__name__)

# Key text -> seconds added (positive) or removed (negative).
ADJUST_KEYS: dict[str, float] = {
    "]": ONE_SECOND,
    "[": -ONE_SECOND,
    "'": ONE_MINUTE,
    ";": -ONE_MINUTE,
    ".": ONE_HOUR,
    ",": -ONE_HOUR,
}

_HINT = "[ ]: ∓1 s    ; ': ∓1 min    , .: ∓1 h    R: restart    Q: stop"


class TimerWindow(QMainWindow):
    """Shows one :class:`Clock`, started on open, and maps hotkeys onto it."""

    def __init__(self, clock: Clock | None = None, tick_interval_ms: int = 100) -> None:
        super().__init__()
        self._clock = clock or Clock(ClockMode.COUNT_DOWN)
        self._initial = self._clock.read()
        self.setMinimumSize(420, 240)

        self._setup_ui()

        self._timer = QTimer(self)
        self._timer.setInterval(tick_interval_ms)
        self._timer.timeout.connect(self._tick)

        self._clock.start()
        self._timer.start()
        self._refresh()

    def _setup_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        mode = "Count up" if self._clock.mode == ClockMode.COUNT_UP else "Count down"
        header = QLabel(f"Timer ({mode})")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setFont(QFont("Adwaita Sans", 18, QFont.Weight.Bold))
        layout.addWidget(header)

        self._time_label = QLabel()
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setFont(QFont("Adwaita Sans", 48, QFont.Weight.Bold))
        layout.addWidget(self._time_label, stretch=1)

        hint = QLabel(_HINT)
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint)

        self.setCentralWidget(central)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    # ── Commands ─────────────────────────────────────────────────────────

    def adjust(self, seconds: float) -> None:
        if seconds >= 0:
            self._clock.add(seconds)
        else:
            self._clock.subtract(-seconds)
        self._refresh()

    def restart(self) -> None:
        """Reset to the value the timer was opened with and run again."""
        self._clock.reset(self._initial)
        self._clock.start()
        if not self._timer.isActive():
            self._timer.start()
        self._refresh()

    def stop(self) -> None:
        self._clock.stop()
        _LOGGER.debug("Timer stopped at %s", format_duration(self._clock.read(), True))
        self._refresh()

    # ── Events ───────────────────────────────────────────────────────────

    def keyPressEvent(self, a0: QKeyEvent | None) -> None:  # noqa: N802
        if a0 is None:
            return
        text = a0.text().lower()
        if text in ADJUST_KEYS:
            self.adjust(ADJUST_KEYS[text])
        elif text == "r":
            self.restart()
        elif text == "q":
            self.stop()
        else:
            super().keyPressEvent(a0)

    def _tick(self) -> None:
        self._clock.read_and_update()
        self._refresh()
        if self._clock.state != ClockState.RUNNING:
            self._timer.stop()

    def _refresh(self) -> None:
        value = self._clock.read()
        self._time_label.setText(format_duration(value, precise=True))
        if self._clock.state == ClockState.RUNNING:
            self.setWindowTitle("Timer - Running")
        else:
            self.setWindowTitle(f"Timer - Stopped at {format_duration(value)}")
