"""Visual theme constants and QSS styles for the clock window."""

from __future__ import annotations

from dataclasses import dataclass

from chessclock.core.enums import Status


@dataclass(frozen=True)
class PanelTheme:
    """Colour scheme for a player's time panel."""

    idle_background: str
    idle_text: str
    running_background: str
    stopped_background: str
    finished_background: str
    finished_active_background: str
    active_text: str
    low_time_text: str

    @classmethod
    def default(cls) -> PanelTheme:
        return cls(
            idle_background="#2b2b2b",
            idle_text="#aaa",
            running_background="#3a7d44",  # green
            stopped_background="#b58b1e",  # yellow
            finished_background="#8b2020",  # red
            finished_active_background="#2e8b57",  # sea green
            active_text="white",
            low_time_text="#ffb3b3",
        )

    def background_for(self, status: Status, active: bool = True) -> str:
        if status == Status.FINISHED:
            return self.finished_active_background if active else self.finished_background
        if not active:
            return self.idle_background
        if status == Status.RUNNING:
            return self.running_background
        return self.stopped_background


APP_STYLE = """
QMainWindow, QDialog {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLineEdit, QComboBox {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 4px 8px;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""
