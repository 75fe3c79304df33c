#!/usr/bin/env python3
"""
Scenario runner for set scripts.

Runs every tests/scenarios/test_*.tset file through the CLI in a
subprocess and verifies exit codes and output:
- 0: Success (no errors, no warnings)
- 1: Success with warnings
- 2: Parse or check errors

Usage:
    python tests/run_tests.py
    python tests/run_tests.py --verbose
    python tests/run_tests.py --filter err --json
"""

import argparse
import json
import subprocess
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from tqdm import tqdm

from scenario_metadata import (
    check_output,
    discover_scenarios,
    get_expected_exit_code,
    parse_scenario_metadata,
)


def run_single_test(scenario: Path, project_root: Path) -> tuple[str, bool, int, int, str]:
    """Run a single scenario and return results."""
    name = scenario.name
    expected_exit_code = get_expected_exit_code(scenario)
    metadata = parse_scenario_metadata(scenario)

    try:
        result = subprocess.run(
            [sys.executable, "-m", "typedset", str(scenario)],
            cwd=project_root,
            capture_output=True,
            text=True,
            timeout=metadata.timeout_seconds,
        )
    except subprocess.TimeoutExpired:
        return name, False, expected_exit_code, -1, "TEST TIMEOUT"

    failures = check_output(metadata, result.stdout, result.stderr)
    passed = result.returncode == expected_exit_code and not failures

    output = ""
    if failures:
        output += "\n".join(failures) + "\n"
    if result.stdout:
        output += f"STDOUT:\n{result.stdout}\n"
    if result.stderr:
        output += f"STDERR:\n{result.stderr}\n"

    return name, passed, expected_exit_code, result.returncode, output


def main():
    parser = argparse.ArgumentParser(description="Run set script scenarios")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show detailed output for each test")
    parser.add_argument("-j", "--jobs", type=int, default=4,
                        help="Number of parallel test jobs (default: 4)")
    parser.add_argument("--filter", type=str,
                        help="Only run scenarios whose name contains this pattern")
    parser.add_argument("--json", action="store_true",
                        help="Output results in JSON format")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    scenarios = discover_scenarios(project_root / "tests" / "scenarios")

    if args.filter:
        scenarios = [s for s in scenarios if args.filter in s.name]

    if not scenarios:
        if not args.json:
            print("No scenario files found!")
        return 1

    if not args.json:
        print(f"Running {len(scenarios)} scenarios with {args.jobs} parallel jobs...")
        print()

    start_time = time.time()

    results = []
    show_progress = not args.json and not args.verbose
    with ThreadPoolExecutor(max_workers=args.jobs) as executor:
        futures = {executor.submit(run_single_test, s, project_root): s for s in scenarios}
        pbar = tqdm(total=len(scenarios), desc="Running scenarios", unit="test",
                    bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]",
                    disable=not show_progress)
        for future in as_completed(futures):
            results.append(future.result())
            pbar.update(1)
        pbar.close()

    duration = time.time() - start_time

    passed_tests = []
    failed_tests = []
    for name, passed, expected, actual, output in sorted(results):
        if passed:
            passed_tests.append(name)
            if args.verbose and not args.json:
                print(f"✓ {name} (expected: {expected}, actual: {actual})")
        else:
            failed_tests.append((name, expected, actual, output))
            if not args.json:
                print(f"✗ {name} (expected: {expected}, actual: {actual})")
                if args.verbose and output:
                    print(f"  Output: {output}")

    if args.json:
        print(json.dumps({
            "total_tests": len(results),
            "passed": len(passed_tests),
            "failed": len(failed_tests),
            "duration_seconds": round(duration, 2),
            "failed_tests": [
                {"name": name, "expected_exit_code": expected, "actual_exit_code": actual}
                for name, expected, actual, _ in failed_tests
            ],
        }, indent=2))
        return 1 if failed_tests else 0

    print()
    print(f"Test Results ({duration:.2f}s):")
    print(f"  Passed: {len(passed_tests)}")
    print(f"  Failed: {len(failed_tests)}")
    print(f"  Total:  {len(results)}")

    if failed_tests:
        print()
        print("Failed tests:")
        for name, expected, actual, _ in failed_tests:
            print(f"  {name}: expected {expected}, got {actual}")
        return 1

    print()
    print("All tests passed! ✓")
    return 0


if __name__ == "__main__":
    sys.exit(main())
