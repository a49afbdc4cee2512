#!/usr/bin/env python3
# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the specdoc CI checks locally: format, lint, type check, tests, docs and build.

Pass step names to run only those steps, e.g. ``tools/ci.py lint tests``.
"""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=specdoc", "--cov-report=term-missing"]),
    "docs": ("Docs", ["uv", "run", "sphinx-build", "-q", "-b", "html", "docs/sphinx", "build/docs"]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run specdoc CI checks locally.")
    parser.add_argument("steps", nargs="*", metavar="STEP", help=f"Steps to run: {', '.join(STEPS)} (default: all)")
    args = parser.parse_args(argv)

    unknown = [key for key in args.steps if key not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")
    selected = args.steps or list(STEPS)
    results = [_run_step(*STEPS[key]) for key in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_SEPARATOR = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue(name))
    print(chalk.blue(_SEPARATOR))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEPARATOR))
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
