"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessclock.core.config import ONE_MINUTE
from chessclock.core.enums import ClockMode, Player, TimingMethod
from chessclock.core.rules import Rules


def _non_negative(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {text!r}")
    return value


def _timing_method(text: str) -> TimingMethod:
    try:
        return TimingMethod.from_name(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessclock", description="Two-player chess clock"
    )
    parser.add_argument("--time", type=_non_negative, metavar="MIN",
                        help="Minutes per player (skips the settings dialog)")
    parser.add_argument("--player2-time", type=_non_negative, metavar="MIN",
                        help="Minutes for Player 2 (default: same as --time)")
    parser.add_argument("--increment", type=_non_negative, metavar="SEC",
                        help="Increment per move in seconds (default: 0)")
    parser.add_argument("--method", type=_timing_method, metavar="{fischer,bronstein}",
                        help="Increment method (default: fischer)")
    parser.add_argument("--starter", type=int, choices=(1, 2),
                        help="Player whose clock runs first (default: 1)")
    timer = parser.add_argument_group("single timer")
    timer.add_argument("--timer", action="store_true",
                       help="Run one count-down (or count-up) timer instead")
    timer.add_argument("--count-up", action="store_true",
                       help="Timer counts up instead of down")
    timer.add_argument("--start", type=_non_negative, metavar="SEC",
                       help="Timer start value in seconds "
                            "(default: 0 counting up, 10 minutes counting down)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log clock events at DEBUG level")
    return parser


def rules_from_args(args: argparse.Namespace) -> Rules | None:
    """Rules described on the command line, or ``None`` if none were given."""
    given = (args.time, args.player2_time, args.increment, args.method, args.starter)
    if all(value is None for value in given):
        return None

    rules = Rules.default()
    rules.increment = 0.0
    if args.time is not None:
        rules.player1_time = rules.player2_time = args.time * ONE_MINUTE
    if args.player2_time is not None:
        rules.player2_time = args.player2_time * ONE_MINUTE
    if args.increment is not None:
        rules.increment = args.increment
    if args.method is not None:
        rules.timing_method = args.method
    if args.starter is not None:
        rules.starter = Player(args.starter - 1)
    return rules


def main(argv: list[str] | None = None) -> None:
    """Launch the chess clock, or the single timer with ``--timer``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    rules = rules_from_args(args)
    if args.timer and rules is not None:
        parser.error("--timer cannot be combined with chess clock options")
    if not args.timer and (args.count_up or args.start is not None):
        parser.error("--count-up and --start require --timer")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chessclock.ui.bootstrap import run_application, run_timer_application

    if args.timer:
        mode = ClockMode.COUNT_UP if args.count_up else ClockMode.COUNT_DOWN
        sys.exit(run_timer_application(mode, args.start, [sys.argv[0]]))
    sys.exit(run_application(rules, [sys.argv[0]]))


if __name__ == "__main__":
    main()
