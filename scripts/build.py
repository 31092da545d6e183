#!/usr/bin/env python3
"""
Build script for em-client.

Runs the linter, type checker and test suite, and builds the distribution.

Usage: python scripts/build.py [build|clean|test|lint]
"""

import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parent.parent
SOURCES = ["src/", "tests/"]

CHECKS = [
    ("Running linter", ["ruff", "check", *SOURCES]),
    ("Checking formatting", ["ruff", "format", "--check", *SOURCES]),
    ("Running type checker", ["mypy", "src/em_client"]),
    ("Running tests", ["pytest", "tests/"]),
    ("Building package", [sys.executable, "-m", "build"]),
]

ARTIFACTS = [
    "build",
    "dist",
    "src/*.egg-info",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    "htmlcov",
    ".coverage",
]


def run_command(command: List[str], cwd: Optional[Path] = None) -> int:
    """Run a command and return its exit code."""
    print(f"Running: {' '.join(command)}")
    result = subprocess.run(command, cwd=cwd or ROOT)
    return result.returncode


def build_package() -> int:
    """Lint, type-check, test and build the distribution."""
    print("Building em-client...")

    for title, command in CHECKS:
        print(f"\n{title}...")
        if run_command(command) != 0:
            print(f"FAILED: {title.lower()}")
            return 1

    print("\nBuild completed successfully!")
    return 0


def clean() -> int:
    """Clean build artifacts."""
    print("Cleaning build artifacts...")

    for pattern in ARTIFACTS:
        for path in ROOT.glob(pattern):
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()

    for cache in ROOT.rglob("__pycache__"):
        shutil.rmtree(cache, ignore_errors=True)

    print("Clean completed!")
    return 0


def test() -> int:
    """Run tests with coverage."""
    print("Running tests with coverage...")
    return run_command([
        "pytest",
        "tests/",
        "--cov=em_client",
        "--cov-report=term-missing",
        "--cov-report=html",
    ])


def lint() -> int:
    """Run linter with auto-fix, then the formatter."""
    print("Running linter and formatter...")

    result = run_command(["ruff", "check", "--fix", *SOURCES])
    if result != 0:
        return result

    return run_command(["ruff", "format", *SOURCES])


COMMANDS = {
    "build": build_package,
    "clean": clean,
    "test": test,
    "lint": lint,
}


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage: python scripts/build.py [build|clean|test|lint]")
        sys.exit(1)

    command = COMMANDS.get(sys.argv[1])
    if command is None:
        print(f"Unknown command: {sys.argv[1]}")
        print(f"Available commands: {', '.join(COMMANDS)}")
        sys.exit(1)

    sys.exit(command())


if __name__ == "__main__":
    main()
