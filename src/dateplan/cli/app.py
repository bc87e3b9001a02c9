"""Command-line harness for the date planner.

Thin wrapper over the engine: every command builds states, calls the
engine functions and prints what comes back.

Commands:
    dateplan demo                     Walk through a fixed set of example evaluations
    dateplan scenario --time 14 ...   Run one scenario through a planner
    dateplan batch [--json]           Compare planners over the scenario suite
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from dateplan.config import get_default_planner, get_log_level
from dateplan.engine import (
    evaluate,
    evaluate_date_plan,
    get_planner,
    go_to_cafe,
    go_to_restaurant,
    list_planners,
    optimal_course,
)
from dateplan.models.state import DateState, Location, Weather
from dateplan.testing import (
    build_scenario,
    compare_planners,
    comprehensive_test,
    print_results_summary,
    success_percentage,
)

logger = logging.getLogger(__name__)


def format_state(state: DateState) -> str:
    """One-line rendering of a state."""
    return (
        f"{state.time:02d}:00 @ {state.location.value:<10} "
        f"mood={state.mood_partner:<2} budget={state.budget:<6} "
        f"weather={state.weather.value}"
    )


def run_demo() -> list[tuple[str, Any]]:
    """Evaluate the fixed sequence of example invocations.

    Returns:
        (label, value) pairs in evaluation order
    """
    afternoon = DateState(
        time=14, location=Location.STATION, mood_partner=7, budget=8000, weather=Weather.SUNNY
    )
    evening = DateState(
        time=18, location=Location.STATION, mood_partner=7, budget=8000, weather=Weather.SUNNY
    )
    broke = DateState(
        time=14, location=Location.STATION, mood_partner=5, budget=0, weather=Weather.RAINY
    )
    optimal = optimal_course(afternoon)
    results = comprehensive_test()

    return [
        ("cafe at 14:00", go_to_cafe(afternoon)),
        ("restaurant at 14:00", go_to_restaurant(afternoon)),
        ("restaurant at 18:00", go_to_restaurant(evening)),
        ("optimal course from 14:00", optimal),
        ("score of optimal course", evaluate_date_plan(afternoon, optimal)),
        ("score starting broke", evaluate_date_plan(broke, go_to_cafe(broke))),
        ("scenario suite success %", success_percentage(results)),
    ]


def _print_value(label: str, value: Any) -> None:
    if isinstance(value, DateState):
        print(f"{label:<28} {format_state(value)}")
    else:
        print(f"{label:<28} {value}")


def cmd_demo(args: argparse.Namespace) -> int:
    for label, value in run_demo():
        _print_value(label, value)
    return 0


def cmd_scenario(args: argparse.Namespace) -> int:
    planner = get_planner(args.planner)
    initial = build_scenario(args.time, args.budget, args.mood, Weather(args.weather))
    final = planner(initial)
    evaluation = evaluate(initial, final)

    if args.json:
        print(json.dumps({
            "planner": args.planner,
            "initial": initial.to_dict(),
            "final": final.to_dict(),
            "evaluation": evaluation.to_dict(),
        }, indent=2))
        return 0

    _print_value("initial", initial)
    _print_value("final", final)
    print(f"{'outcome':<28} {evaluation.outcome.value}")
    print(f"{'score':<28} {evaluation.score}")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    names = None
    if args.planners:
        names = [n.strip() for n in args.planners.split(",")]
        for name in names:
            get_planner(name)

    stats = compare_planners(names)

    if args.json:
        print(json.dumps({name: s.to_dict() for name, s in stats.items()}, indent=2))
    else:
        print_results_summary(stats)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dateplan",
        description="Deterministic date planning simulator",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: $DATEPLAN_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Print the example evaluations")
    demo.set_defaults(func=cmd_demo)

    scenario = subparsers.add_parser("scenario", help="Run one scenario through a planner")
    scenario.add_argument("--time", type=int, required=True, help="Starting hour")
    scenario.add_argument("--budget", type=int, required=True, help="Starting budget")
    scenario.add_argument("--mood", type=int, required=True, help="Starting partner mood (1-10)")
    scenario.add_argument(
        "--weather",
        choices=[w.value for w in Weather],
        required=True,
        help="Weather for the date",
    )
    scenario.add_argument(
        "--planner",
        type=str,
        default=get_default_planner(),
        help=f"Planner name, one of: {', '.join(list_planners())}",
    )
    scenario.add_argument("--json", action="store_true", help="Print JSON instead of text")
    scenario.set_defaults(func=cmd_scenario)

    batch = subparsers.add_parser("batch", help="Compare planners over the scenario suite")
    batch.add_argument(
        "--planners",
        type=str,
        default=None,
        help="Comma-separated list of planners (default: all)",
    )
    batch.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    batch.set_defaults(func=cmd_batch)

    return parser


def resolve_log_level(name: str) -> int:
    """Numeric logging level for a level name.

    Raises:
        ValueError: If the name is not a known logging level
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name.upper()}")
    return level


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=resolve_log_level(args.log_level or get_log_level()),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        return args.func(args)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
