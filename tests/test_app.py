"""Tests for command-line parsing in the entry point."""

from __future__ import annotations

import pytest

from chessclock.app import build_parser, main, rules_from_args
from chessclock.core.enums import ClockMode, Player, TimingMethod


def _rules(*argv: str):
    return rules_from_args(build_parser().parse_args(list(argv)))


class TestRulesFromArgs:
    def test_no_rule_flags_means_settings_dialog(self) -> None:
        assert _rules() is None
        assert _rules("--verbose") is None

    def test_time_applies_to_both_players(self) -> None:
        rules = _rules("--time", "5")
        assert rules is not None
        assert (rules.player1_time, rules.player2_time) == (300.0, 300.0)
        assert rules.increment == 0.0
        assert rules.timing_method == TimingMethod.FISCHER

    def test_all_flags(self) -> None:
        rules = _rules(
            "--time", "3", "--player2-time", "1", "--increment", "2",
            "--method", "bronstein", "--starter", "2",
        )
        assert rules is not None
        assert (rules.player1_time, rules.player2_time) == (180.0, 60.0)
        assert rules.increment == 2.0
        assert rules.timing_method == TimingMethod.BRONSTEIN
        assert rules.starter == Player.PLAYER2

    @pytest.mark.parametrize(
        "argv",
        [["--time", "-1"], ["--increment", "x"], ["--method", "delay"], ["--starter", "3"]],
    )
    def test_invalid_flags_exit(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(argv)


def test_main_passes_rules_to_application(monkeypatch) -> None:
    seen: list[object] = []

    def _fake_run(rules, argv):
        seen.append(rules)
        return 0

    monkeypatch.setattr("chessclock.ui.bootstrap.run_application", _fake_run)
    with pytest.raises(SystemExit) as exc_info:
        main(["--time", "1"])
    assert exc_info.value.code == 0
    assert seen[0].player1_time == 60.0


class TestTimerFlags:
    def test_timer_runs_single_clock(self, monkeypatch) -> None:
        seen: list[tuple[object, object]] = []

        def _fake_run(mode, start, argv):
            seen.append((mode, start))
            return 0

        monkeypatch.setattr("chessclock.ui.bootstrap.run_timer_application", _fake_run)
        with pytest.raises(SystemExit):
            main(["--timer", "--count-up", "--start", "90"])
        assert seen == [(ClockMode.COUNT_UP, 90.0)]

    def test_timer_defaults_to_count_down(self, monkeypatch) -> None:
        seen: list[tuple[object, object]] = []
        monkeypatch.setattr(
            "chessclock.ui.bootstrap.run_timer_application",
            lambda mode, start, argv: seen.append((mode, start)) or 0,
        )
        with pytest.raises(SystemExit):
            main(["--timer"])
        assert seen == [(ClockMode.COUNT_DOWN, None)]

    @pytest.mark.parametrize(
        "argv", [["--timer", "--time", "5"], ["--count-up"], ["--start", "10"]]
    )
    def test_conflicting_flags_exit(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2
