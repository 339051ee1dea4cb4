"""CLI for exploring RemoteData states.

Commands:
- demo: Walk a simulated request through NotAsked, Loading and its settled state
- render: Render a single state built from its tag
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from typing import Iterator, Optional

from src.remote_data.combinators import fold, with_default
from src.remote_data.config import DemoConfig
from src.remote_data.core import (
    RemoteData,
    Variant,
    failure,
    loading,
    not_asked,
    success,
)

render_state = fold(
    lambda: "Not asked yet",
    lambda: "Loading...",
    lambda value: f"Success: {value}",
    lambda error: f"Failure: {error}",
)


def simulate_request(config: DemoConfig) -> Iterator[RemoteData[str, str]]:
    """Yield the states a caller stores while a request runs."""
    yield not_asked()
    yield loading()
    time.sleep(config.latency_seconds)
    if config.should_fail:
        yield failure(config.failure_message)
    else:
        yield success(config.success_value)


def build_state(tag: str, payload: Optional[str] = None) -> RemoteData[str, str]:
    """Build a state from its tag name; Success and Failure require a payload."""
    variant = Variant(tag)
    if variant is Variant.NOT_ASKED:
        return not_asked()
    if variant is Variant.LOADING:
        return loading()
    if payload is None:
        raise ValueError(f"{variant.value} requires a payload")
    if variant is Variant.SUCCESS:
        return success(payload)
    return failure(payload)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="RemoteData - explicit states for remote data"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    demo_parser = subparsers.add_parser("demo", help="Run a simulated request")
    demo_parser.add_argument("--fail", action="store_true", help="Settle as Failure")
    demo_parser.add_argument("--value", default=None, help="Value of the Success")

    render_parser = subparsers.add_parser("render", help="Render a single state")
    render_parser.add_argument("state", choices=[v.value for v in Variant], help="State tag")
    render_parser.add_argument(
        "payload", nargs="?", default=None, help="Value or error, required for Success and Failure"
    )

    args = parser.parse_args()

    if args.command == "demo":
        overrides: dict[str, object] = {}
        if args.fail:
            overrides["should_fail"] = True
        if args.value is not None:
            overrides["success_value"] = args.value
        run_demo(DemoConfig.with_overrides(**overrides))
    elif args.command == "render":
        try:
            state = build_state(args.state, args.payload)
        except ValueError as e:
            render_parser.error(str(e))
        print(render_state(state))
    else:
        parser.print_help()
        sys.exit(1)


def run_demo(config: Optional[DemoConfig] = None) -> None:
    """Print every state of a simulated request, then a JSON summary."""
    config = config or DemoConfig()

    print("=" * 60)
    print("RemoteData - Demo")
    print("=" * 60)

    state: RemoteData[str, str] = not_asked()
    for step, state in enumerate(simulate_request(config), 1):
        print(f"[{step}/3] {state.tag.value:<9} {render_state(state)}")

    print("-" * 60)
    print("JSON output:")
    summary = {
        "final_state": state.tag.value,
        "value": with_default(config.fallback)(state),
    }
    print(json.dumps(summary, indent=2))
