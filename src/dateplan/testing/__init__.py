"""Scenario batch running for the date planner.

Key pieces:
- run_scenario / comprehensive_test: fixed scenario suite through one planner
- success_percentage: share of successful dates
- PlannerStats / compare_planners: side-by-side planner statistics

Usage:
    from dateplan.testing import comprehensive_test, success_percentage

    results = comprehensive_test()
    print(f"{success_percentage(results)}% successful")
"""

from .batch_runner import (
    COMPREHENSIVE_SCENARIOS,
    PlannerStats,
    Scenario,
    ScenarioResult,
    build_scenario,
    compare_planners,
    comprehensive_test,
    print_results_summary,
    run_planner_batch,
    run_scenario,
    success_percentage,
)

__all__ = [
    "COMPREHENSIVE_SCENARIOS",
    "Scenario",
    "ScenarioResult",
    "PlannerStats",
    "build_scenario",
    "run_scenario",
    "comprehensive_test",
    "success_percentage",
    "run_planner_batch",
    "compare_planners",
    "print_results_summary",
]
