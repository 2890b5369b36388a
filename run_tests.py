#!/usr/bin/env python
"""Test runner for LAI SDK.

Thin wrapper that turns a few common selections into a pytest command
line. Anything after ``--`` is handed to pytest unchanged.
"""

import argparse
import subprocess
import sys

PROVIDERS = ("openai", "anthropic", "gemini", "ollama")


def build_command(args, extra):
    cmd = [sys.executable, "-m", "pytest"]

    # Both flags together means everything, not the empty intersection
    markers = []
    if args.unit:
        markers.append("unit")
    if args.integration:
        markers.append("integration")
    if len(markers) == 1:
        cmd.extend(["-m", markers[0]])

    if args.provider:
        cmd.extend(["-k", " or ".join(args.provider)])

    if args.verbose:
        cmd.append("-vv")
    if args.failfast:
        cmd.append("-x")

    if args.coverage:
        cmd.extend([
            "--cov=lai_sdk",
            "--cov-report=term-missing",
            "--cov-report=html"
        ])

    cmd.extend(extra)
    return cmd


def main():
    parser = argparse.ArgumentParser(description="Run LAI SDK tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run integration tests only")
    parser.add_argument(
        "--provider", action="append", choices=PROVIDERS,
        help="Only tests whose name mentions this provider (repeatable)"
    )
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--failfast", "-x", action="store_true", help="Stop at the first failure")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    argv = sys.argv[1:]
    extra = []
    if "--" in argv:
        split = argv.index("--")
        argv, extra = argv[:split], argv[split + 1:]

    cmd = build_command(parser.parse_args(argv), extra)
    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


if __name__ == "__main__":
    sys.exit(main())
