"""ClockWidget — side-by-side display of both players' time."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from chessclock.core.config import DEFAULT_CONFIG, ClockConfig
from chessclock.core.display import format_duration
from chessclock.core.enums import Player, Status
from chessclock.ui.styles.theme import PanelTheme


class _PlayerPanel(QLabel):
    """Time display for one player."""

    clicked = pyqtSignal(object)  # Player

    def __init__(
        self,
        player: Player,
        theme: PanelTheme,
        low_time_threshold: float,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._player = player
        self._theme = theme
        self._low_time_threshold = low_time_threshold
        self._active = False
        self._status = Status.STOPPED
        self._is_low_time = False

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Adwaita Sans", 48, QFont.Weight.Bold))
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.update_time(0.0)

    @property
    def player(self) -> Player:
        return self._player

    def set_active(self, active: bool, status: Status) -> None:
        self._active = active
        self._status = status
        self._apply_style()

    def update_time(self, seconds: float) -> None:
        self.setText(format_duration(seconds))
        self._is_low_time = seconds < self._low_time_threshold
        self._apply_style()

    def _apply_style(self) -> None:
        th = self._theme
        if not self._active and self._status != Status.FINISHED:
            self.setStyleSheet(
                f"background-color: {th.idle_background}; color: {th.idle_text}; "
                "padding: 12px; border-radius: 8px;"
            )
            return

        color = th.active_text
        if self._is_low_time and self._status == Status.RUNNING:
            color = th.low_time_text
        background = th.background_for(self._status, self._active)
        self.setStyleSheet(
            f"background-color: {background}; color: {color}; "
            "padding: 12px; border-radius: 8px;"
        )

    def mousePressEvent(self, ev: QMouseEvent | None) -> None:  # noqa: N802
        self.clicked.emit(self._player)
        super().mousePressEvent(ev)


class ClockWidget(QWidget):
    """Both players' panels with their labels."""

    panel_clicked = pyqtSignal(object)  # Player

    def __init__(
        self,
        config: ClockConfig = DEFAULT_CONFIG,
        theme: PanelTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        theme = theme or PanelTheme.default()
        self._panels: dict[Player, _PlayerPanel] = {}
        self._labels: dict[Player, QLabel] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(20)

        for player in Player:
            box = QVBoxLayout()
            label = QLabel(str(player))
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setFont(QFont("Adwaita Sans", 14))
            panel = _PlayerPanel(player, theme, config.low_time_threshold)
            panel.clicked.connect(self.panel_clicked.emit)
            box.addWidget(label)
            box.addWidget(panel)
            layout.addLayout(box)
            self._panels[player] = panel
            self._labels[player] = label

    def panel(self, player: Player) -> _PlayerPanel:
        return self._panels[player]

    def update_display(
        self, times: tuple[float, float], active: Player, status: Status
    ) -> None:
        for player in Player:
            panel = self._panels[player]
            panel.update_time(times[player.index])
            panel.set_active(player == active, status)
