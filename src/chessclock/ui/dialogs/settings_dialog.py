"""SettingsDialog — collect match rules before the clock starts."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessclock.core.config import ONE_MINUTE
from chessclock.core.display import format_duration
from chessclock.core.enums import Player, TimingMethod
from chessclock.core.rules import Rules

# ── Input parsing ────────────────────────────────────────────────────────────


# Largest value a 64-bit unsigned field holds; anything above is rejected.
_MAX_WHOLE = 2**64 - 1


def _parse_whole(text: str) -> int:
    text = text.strip()
    if not (text.isascii() and text.isdigit()) or len(text) > len(str(_MAX_WHOLE)):
        return 0
    value = int(text)
    if value > _MAX_WHOLE:
        return 0
    return value


def parse_minutes(text: str) -> float:
    """Minutes typed by the user as seconds; malformed input is zero."""
    return _parse_whole(text) * ONE_MINUTE


def parse_seconds(text: str) -> float:
    """Seconds typed by the user; malformed input is zero."""
    return float(_parse_whole(text))


# ── Dialog ───────────────────────────────────────────────────────────────────


class SettingsDialog(QDialog):
    """Modal form editing a :class:`Rules` value."""

    def __init__(self, rules: Rules | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Chess Clock - Select Settings")
        self.setModal(True)
        self.setMinimumWidth(420)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._rules = (rules or Rules.default()).copy()
        self._time_inputs: dict[Player, QLineEdit] = {}
        self._time_printouts: dict[Player, QLabel] = {}
        self._setup_ui()
        self._refresh_printouts()

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)
        main.setSpacing(20)

        header = QLabel("Chess Clock")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setFont(QFont("Adwaita Sans", 24, QFont.Weight.Bold))
        main.addWidget(header)

        self._form = QFormLayout()
        self._form.setSpacing(12)

        for player in Player:
            edit = QLineEdit()
            edit.setPlaceholderText(f"Enter {player} time (minutes)")
            edit.textChanged.connect(
                lambda text, p=player: self._on_time_changed(p, text)
            )
            printout = QLabel()
            self._time_inputs[player] = edit
            self._time_printouts[player] = printout
            self._form.addRow(f"{player} time", self._row(edit, printout))

        self._increment_input = QLineEdit()
        self._increment_input.setPlaceholderText("Enter increment (seconds)")
        self._increment_input.textChanged.connect(self._on_increment_changed)
        self._increment_printout = QLabel()
        self._form.addRow(
            "Increment", self._row(self._increment_input, self._increment_printout)
        )

        self._combo_method = QComboBox()
        self._combo_method.addItems([str(m) for m in TimingMethod])
        self._combo_method.setCurrentIndex(int(self._rules.timing_method))
        self._combo_method.currentIndexChanged.connect(self._on_method_changed)
        self._form.addRow("Timing method", self._combo_method)

        self._combo_starter = QComboBox()
        self._combo_starter.addItems([str(p) for p in Player])
        self._combo_starter.setCurrentIndex(self._rules.starter.index)
        self._combo_starter.currentIndexChanged.connect(self._on_starter_changed)
        self._form.addRow("Active player", self._combo_starter)

        main.addLayout(self._form)

        self._btn_start = QPushButton("Start clock")
        self._btn_start.setDefault(True)
        self._btn_start.clicked.connect(self.accept)
        main.addWidget(self._btn_start)

    @staticmethod
    def _row(edit: QLineEdit, printout: QLabel) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        printout.setMinimumWidth(70)
        layout.addWidget(edit)
        layout.addWidget(printout)
        return row

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_time_changed(self, player: Player, text: str) -> None:
        self._rules.set_time(player, parse_minutes(text))
        self._refresh_printouts()

    def _on_increment_changed(self, text: str) -> None:
        self._rules.increment = parse_seconds(text)
        self._refresh_printouts()

    def _on_method_changed(self, index: int) -> None:
        self._rules.timing_method = TimingMethod(index)

    def _on_starter_changed(self, index: int) -> None:
        self._rules.starter = Player(index)

    def _refresh_printouts(self) -> None:
        for player, label in self._time_printouts.items():
            label.setText(format_duration(self._rules.time_for(player)))
        self._increment_printout.setText(format_duration(self._rules.increment))

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def rules(self) -> Rules:
        return self._rules.copy()

    @staticmethod
    def ask(rules: Rules | None = None, parent: QWidget | None = None) -> Rules | None:
        dlg = SettingsDialog(rules, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.rules
        return None
