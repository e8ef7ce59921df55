#!/usr/bin/env python3
import subprocess
import sys
from typing import NamedTuple

USAGE = "[--fix] [--no-tests]"
KNOWN_FLAGS = frozenset({"--fix", "--no-tests"})


class Step(NamedTuple):
    name: str
    args: list[str]


def collect_steps(*, fix: bool, with_tests: bool) -> list[Step]:
    steps = (
        [
            Step("format", ["ruff", "format"]),
            Step("lint", ["ruff", "check", "--fix"]),
        ]
        if fix
        else [
            Step("format", ["ruff", "format", "--check"]),
            Step("lint", ["ruff", "check"]),
        ]
    )
    steps.append(Step("types", ["pyright"]))
    if with_tests:
        steps.append(Step("tests", ["pytest", "src/test"]))
    return steps


def run_uv(step: Step) -> None:
    cmd = ["uv", "run", "--active", *step.args]
    print(f"[{step.name}] Running: `{' '.join(cmd)}`")
    result = subprocess.run(cmd)
    if result.returncode != 0:
        print(f"[{step.name}] failed with exit code {result.returncode}", file=sys.stderr)
        sys.exit(result.returncode)


def main() -> None:
    flags = set(sys.argv[1:])
    unknown = flags - KNOWN_FLAGS
    if unknown or len(flags) != len(sys.argv[1:]):
        print(f"Usage: {sys.argv[0]} {USAGE}", file=sys.stderr)
        sys.exit(2)

    for step in collect_steps(fix="--fix" in flags, with_tests="--no-tests" not in flags):
        run_uv(step)


if __name__ == "__main__":
    main()
