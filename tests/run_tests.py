#!/usr/bin/env python
# tests/run_tests.py
"""
Convenient test runner for the pyspeed test suite.
Usage: python tests/run_tests.py [category]
"""

import sys
import subprocess
import argparse


def run_command(cmd):
    """Run a command and print output."""
    print(f"\n🚀 Running: {' '.join(cmd)}")
    print("-" * 60)
    result = subprocess.run(cmd, capture_output=False)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run pyspeed tests by category")
    parser.add_argument(
        "category",
        nargs="?",
        default="all",
        choices=[
            "all", "unit", "integration", "benchmarks", "coverage",
            "profiler", "parallel", "vectorized", "guide", "cli", "quick"
        ],
        help="Test category to run"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-x", "--exitfirst", action="store_true", help="Exit on first failure")

    args = parser.parse_args()

    base_cmd = [sys.executable, "-m", "pytest"]
    if args.verbose:
        base_cmd.append("-v")
    if args.exitfirst:
        base_cmd.append("-x")

    categories = {
        "all": ["tests/"],
        "unit": [
            "tests/test_benchmark_config.py",
            "tests/test_profiler.py",
            "tests/test_comprehensions.py",
            "tests/test_generators.py",
            "tests/test_vectorized.py",
            "tests/test_slots.py",
            "tests/test_memory.py",
            "tests/test_runtime.py",
            "-m", "not slow"
        ],
        "integration": ["tests/", "-m", "integration"],
        "benchmarks": ["tests/benchmark", "--benchmark-only"],
        "coverage": ["tests/", "--cov=pyspeed", "--cov-report=html", "--cov-report=term"],
        "profiler": ["tests/test_profiler.py"],
        "parallel": ["tests/test_parallel.py"],
        "vectorized": ["tests/test_vectorized.py"],
        "guide": ["tests/test_guide.py"],
        "cli": ["tests/test_cli.py"],
        "quick": [  # Quick smoke tests
            "tests/",
            "--ignore=tests/benchmark",
            "-m", "not slow and not integration"
        ]
    }

    cmd = base_cmd + categories.get(args.category, [])

    print(f"\n🧪 pyspeed Test Runner")
    print(f"📁 Category: {args.category}")

    exit_code = run_command(cmd)

    if exit_code == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Tests failed with exit code {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
