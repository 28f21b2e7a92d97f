"""ClockWindow — top-level window driving a ChessClock."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from chessclock.core.chess_clock import ChessClock
from chessclock.core.enums import Player, Status
from chessclock.core.rules import Rules
from chessclock.ui.panels.clock_widget import ClockWidget

_LOGGER = logging.getLogger(__name__)

_HINT = "Space: switch player    Enter: start / stop    Backspace: finish"


class ClockWindow(QMainWindow):
    """Polls the clock on a fixed tick and forwards key presses to it."""

    def __init__(self, clock: ChessClock | None = None) -> None:
        super().__init__()
        self._clock = clock or ChessClock.default()
        self.setMinimumSize(720, 400)

        self._setup_ui()

        self._timer = QTimer(self)
        self._timer.setInterval(self._clock.config.tick_interval_ms)
        self._timer.timeout.connect(self._tick)
        self._timer.start()

        self._refresh()

    @classmethod
    def from_rules(cls, rules: Rules) -> ClockWindow:
        return cls(ChessClock(rules))

    def _setup_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        header = QLabel("Chess Clock")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setFont(QFont("Adwaita Sans", 28, QFont.Weight.Bold))
        layout.addWidget(header)

        self._clock_widget = ClockWidget(self._clock.config)
        self._clock_widget.panel_clicked.connect(self._on_panel_clicked)
        layout.addWidget(self._clock_widget, stretch=1)

        self._rules_label = QLabel(self._clock.rules.describe())
        self._rules_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._rules_label)

        hint = QLabel(_HINT)
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint)

        self.setCentralWidget(central)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def clock(self) -> ChessClock:
        return self._clock

    @property
    def clock_widget(self) -> ClockWidget:
        return self._clock_widget

    # ── Commands ─────────────────────────────────────────────────────────

    def switch_player(self) -> None:
        self._clock.switch_player()
        self._refresh()

    def toggle_start_stop(self) -> None:
        self._clock.update()
        if self._clock.status() == Status.STOPPED:
            self._clock.start()
        else:
            self._clock.stop()
        self._refresh()

    def finish(self) -> None:
        self._clock.finish()
        self._refresh()

    # ── Events ───────────────────────────────────────────────────────────

    def keyPressEvent(self, a0: QKeyEvent | None) -> None:  # noqa: N802
        if a0 is None:
            return
        key = a0.key()
        if key == Qt.Key.Key_Space:
            self.switch_player()
        elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.toggle_start_stop()
        elif key == Qt.Key.Key_Backspace:
            self.finish()
        else:
            super().keyPressEvent(a0)

    def _on_panel_clicked(self, player: Player) -> None:
        if player == self._clock.active_player():
            self.switch_player()

    def _tick(self) -> None:
        self._clock.update()
        self._refresh()
        if self._clock.status() == Status.FINISHED:
            _LOGGER.debug("Clock finished, polling stopped")
            self._timer.stop()

    def _refresh(self) -> None:
        status = self._clock.status()
        self._clock_widget.update_display(
            self._clock.read(), self._clock.active_player(), status
        )
        self.setWindowTitle(f"Chess Clock - {status}")
