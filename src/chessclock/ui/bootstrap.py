"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessclock.core.clock import Clock
from chessclock.core.config import DEFAULT_CONFIG
from chessclock.core.display import format_duration
from chessclock.core.enums import ClockMode
from chessclock.core.rules import Rules

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessclock.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Clock")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(rules: Rules | None = None, argv: list[str] | None = None) -> int:
    """Create and run the Qt application.

    Without *rules* the settings dialog is shown first; cancelling it exits.
    """
    from PyQt6.QtWidgets import QApplication

    from chessclock.ui.dialogs.settings_dialog import SettingsDialog
    from chessclock.ui.main_window import ClockWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    if rules is None:
        rules = SettingsDialog.ask()
        if rules is None:
            _LOGGER.info("Settings dialog cancelled, exiting")
            return 0

    _LOGGER.info("Starting clock with rules %s", rules.describe())
    window = ClockWindow.from_rules(rules)
    window.show()

    return app.exec()


def run_timer_application(
    mode: ClockMode, start: float | None = None, argv: list[str] | None = None
) -> int:
    """Create and run a single-timer Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessclock.ui.timer_window import TimerWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    clock = Clock(mode, start)
    _LOGGER.info("Starting %s timer at %s", mode.name.lower(), format_duration(clock.read()))
    window = TimerWindow(clock, DEFAULT_CONFIG.tick_interval_ms)
    window.show()

    return app.exec()
