#!/usr/bin/env python3
"""Decode governance admin calldata read from argv or stdin."""

from pathlib import Path
import sys

SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from govcalldata.core.service import decode_call


def print_decoded(calldata: str) -> int:
    """Decode the calldata against the registry and print the details."""
    outcome = decode_call(calldata)
    if not outcome.ok:
        print(f"❌ Error: {outcome.error}")
        return 1

    call = outcome.call
    print(f"Function: {call.function_name}")
    print(f"Selector: {call.selector}")
    for name, value in call.params.items():
        print(f"{name}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(print_decoded(sys.argv[1] if len(sys.argv) > 1 else sys.stdin.read()))
