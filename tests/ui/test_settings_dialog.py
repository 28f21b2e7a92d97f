"""Tests for the settings dialog and its input parsing."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QDialog

from chessclock.core.enums import Player, TimingMethod
from chessclock.core.rules import Rules
from chessclock.ui.dialogs.settings_dialog import (
    SettingsDialog,
    parse_minutes,
    parse_seconds,
)


class TestParsing:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("5", 300.0),
            (" 10 ", 600.0),
            ("", 0.0),
            ("abc", 0.0),
            ("-3", 0.0),
            ("1.5", 0.0),
            ("\u00b2", 0.0),
            ("5\u00b2", 0.0),
            ("\u2460", 0.0),
            ("\uff15", 0.0),
            ("9" * 30, 0.0),
            ("1" * 5000, 0.0),
        ],
    )
    def test_parse_minutes(self, text: str, expected: float) -> None:
        assert parse_minutes(text) == expected

    def test_parse_seconds(self) -> None:
        assert parse_seconds("7") == 7.0
        assert parse_seconds("seven") == 0.0

    def test_parse_accepts_largest_u64(self) -> None:
        assert parse_seconds(str(2**64 - 1)) == float(2**64 - 1)
        assert parse_seconds(str(2**64)) == 0.0


class TestSettingsDialog:
    def test_starts_from_given_rules(self, qapp) -> None:
        dialog = SettingsDialog(Rules(60, 120, 3, Player.PLAYER2, TimingMethod.BRONSTEIN))
        assert dialog._combo_starter.currentIndex() == 1
        assert dialog._combo_method.currentText() == "Bronstein"
        assert dialog._time_printouts[Player.PLAYER2].text() == "02:00"
        assert dialog._increment_printout.text() == "00:03"

    def test_inputs_update_rules_and_printouts(self, qapp) -> None:
        dialog = SettingsDialog()
        dialog._time_inputs[Player.PLAYER1].setText("5")
        dialog._time_inputs[Player.PLAYER2].setText("oops")
        dialog._increment_input.setText("2")
        dialog._combo_method.setCurrentIndex(1)
        dialog._combo_starter.setCurrentIndex(1)

        rules = dialog.rules
        assert rules.player1_time == 300.0
        assert rules.player2_time == 0.0
        assert rules.increment == 2.0
        assert rules.timing_method == TimingMethod.BRONSTEIN
        assert rules.starter == Player.PLAYER2
        assert dialog._time_printouts[Player.PLAYER1].text() == "05:00"
        assert dialog._time_printouts[Player.PLAYER2].text() == "00:00"

    def test_does_not_mutate_caller_rules(self, qapp) -> None:
        rules = Rules.default()
        dialog = SettingsDialog(rules)
        dialog._increment_input.setText("9")
        assert rules.increment == 5.0

    def test_ask_returns_rules_on_accept(self, qapp, monkeypatch) -> None:
        monkeypatch.setattr(
            SettingsDialog, "exec", lambda _self: QDialog.DialogCode.Accepted
        )
        rules = SettingsDialog.ask(Rules.bullet_1m())
        assert rules == Rules.bullet_1m()

    def test_ask_returns_none_on_cancel(self, qapp, monkeypatch) -> None:
        monkeypatch.setattr(
            SettingsDialog, "exec", lambda _self: QDialog.DialogCode.Rejected
        )
        assert SettingsDialog.ask() is None

    def test_unusual_digits_do_not_break_the_form(self, qapp) -> None:
        dialog = SettingsDialog()
        dialog._time_inputs[Player.PLAYER1].setText("①")
        dialog._increment_input.setText("5²")
        assert dialog.rules.player1_time == 0.0
        assert dialog.rules.increment == 0.0
        assert dialog._time_printouts[Player.PLAYER1].text() == "00:00"

    def test_huge_minute_count_falls_back_to_zero(self, qapp) -> None:
        dialog = SettingsDialog()
        dialog._time_inputs[Player.PLAYER2].setText("9" * 30)
        assert dialog.rules.player2_time == 0.0
        assert dialog._time_printouts[Player.PLAYER2].text() == "00:00"

    def test_largest_minute_count_still_renders(self, qapp) -> None:
        dialog = SettingsDialog()
        dialog._time_inputs[Player.PLAYER1].setText("9" * 19)
        assert dialog.rules.player1_time == pytest.approx(float("9" * 19) * 60)
        assert dialog._time_printouts[Player.PLAYER1].text().count(":") == 2
