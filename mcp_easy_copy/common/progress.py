from __future__ import annotations

import sys

# stdout carries the MCP stdio framing, so every helper here writes to stderr.


def log(message: str, verbose: bool = False, stream=None) -> None:
    if verbose:
        print(f"[DEBUG] {message}", file=stream or sys.stderr)


def print_ok(message: str, stream=None) -> None:
    print(f"OK: {message}", file=stream or sys.stderr)


def print_warn(message: str, stream=None) -> None:
    print(f"WARN: {message}", file=stream or sys.stderr)


def print_error(message: str, stream=None) -> None:
    print(f"ERROR: {message}", file=stream or sys.stderr)
