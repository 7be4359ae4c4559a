"""
CLI for trellokit

Auto-discovers registered API actions and exposes them as CLI commands.
Entity modules only need to use @action and @all_action decorators.

Usage:
    trellokit --key <KEY> --token <TOKEN> <category> <action> [args...]

Examples:
    trellokit members current_user
    trellokit boards get --board-id abc123
    trellokit boards add_power_up --board-id abc123 --power-up voting
    trellokit boards all
    trellokit all  # Run all categories
"""

from __future__ import annotations

import argparse
import asyncio
import inspect
import json
import os
import sys
from dataclasses import dataclass
from functools import wraps
from typing import Callable

import defopt
import logfire

from .client import TRELLO_API_URL, TrelloClient, TrelloClientConfig


# =============================================================================
# Global Configuration
# =============================================================================

@dataclass
class GlobalConfig:
    """Global configuration set before subcommand dispatch."""

    url: str
    """Base URL for the API."""

    verbose: bool = False
    """Enable verbose logging."""

    verify_ssl: bool = True
    """Verify SSL certificates."""

    api_key: str | None = None
    """Developer API key."""

    token: str | None = None
    """Member token."""


# Singleton instance - set by parse_global_args()
CONFIG: GlobalConfig | None = None


def create_global_parser() -> argparse.ArgumentParser:
    """Create the global argument parser with all options."""
    parser = argparse.ArgumentParser(
        prog="trellokit",
        description="CLI for the Trello REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,  # handled manually to append category info
    )
    parser.add_argument("--url", "-u", default=os.getenv("TRELLO_URL", TRELLO_API_URL),
                        help="Base URL for the API (or set TRELLO_URL env var)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging")
    parser.add_argument("--no-verify-ssl", action="store_true",
                        help="Disable SSL certificate verification")
    parser.add_argument("--help", "-h", action="store_true",
                        help="Show this help message and exit")
    parser.add_argument("--key", default=os.getenv("TRELLO_API_KEY"),
                        help="API key (or set TRELLO_API_KEY env var)")
    parser.add_argument("--token", default=os.getenv("TRELLO_TOKEN"),
                        help="Member token (or set TRELLO_TOKEN env var)")

    return parser


def print_global_help(parser: argparse.ArgumentParser):
    """Print argparse help plus available categories and actions."""
    import_all_categories()
    from .registry import get_categories, list_actions

    parser.print_help()

    cats = get_categories()
    print("\nCommands:")
    print("    all                    Run every category's smoke test")
    print("    <category> all         Run the category's smoke test")
    print("    <category> <action>    Run a specific action")

    if cats:
        print("\nCategories:")
        for cat in sorted(cats):
            actions = list_actions(cat)
            print(f"    {cat:<20} Actions: {', '.join(actions) or 'all'}")
    else:
        print("\nCategories: none registered yet")

    print("""
Examples:
    trellokit members current_user
    trellokit boards get --board-id abc123
    trellokit all
""")


def parse_global_args(argv: list[str]) -> tuple[GlobalConfig, list[str]]:
    """
    Parse global arguments before subcommand.

    Args:
        argv: Command line arguments (sys.argv[1:])

    Returns:
        Tuple of (GlobalConfig, remaining_argv)
    """
    parser = create_global_parser()
    args, remaining = parser.parse_known_args(argv)

    if args.help:
        print_global_help(parser)
        sys.exit(0)

    if not args.key or not args.token:
        print("Error: --key and --token are required (or set TRELLO_API_KEY / TRELLO_TOKEN)", file=sys.stderr)
        sys.exit(1)

    return GlobalConfig(
        url=args.url,
        verbose=args.verbose,
        verify_ssl=not args.no_verify_ssl,
        api_key=args.key,
        token=args.token,
    ), remaining


def configure_logging(verbose: bool) -> None:
    """Send spans to Logfire only when a write token is present; print locally."""
    logfire.configure(
        send_to_logfire="if-token-present",
        scrubbing=False,
        console=logfire.ConsoleOptions(min_log_level="debug" if verbose else "info"),
    )


# =============================================================================
# Client Factory
# =============================================================================

def get_client() -> TrelloClient:
    """
    Create and return a configured API client.

    Returns:
        Configured TrelloClient instance
    """
    if CONFIG is None:
        raise RuntimeError("Global config not initialized")

    config = TrelloClientConfig(
        base_url=CONFIG.url,
        verify_ssl=CONFIG.verify_ssl,
        api_key=CONFIG.api_key,
        token=CONFIG.token,
    )

    return TrelloClient(config)


# =============================================================================
# Action Wrapper for defopt
# =============================================================================

def print_result(result) -> None:
    """Print an action result as JSON where it is a model or a list of models."""
    if hasattr(result, 'model_dump'):
        print(json.dumps(result.model_dump(mode='json', by_alias=True), indent=2))
    elif isinstance(result, list):
        for item in result:
            print_result(item)
    elif isinstance(result, (dict, bool)):
        print(json.dumps(result, indent=2))
    else:
        print(result)


def create_action_wrapper(func: Callable) -> Callable:
    """
    Wrap an async action function for use with defopt.

    - Removes the `client` parameter (injected automatically)
    - Converts async to sync via asyncio.run
    - Preserves signature, docstring, and type hints for defopt
    """
    sig = inspect.signature(func)
    params = list(sig.parameters.values())

    if params and params[0].name == 'client':
        params = params[1:]

    new_sig = sig.replace(parameters=params)

    @wraps(func)
    def wrapper(*args, **kwargs):
        async def _run():
            async with get_client() as client:
                result = await func(client, *args, **kwargs)
                # An int is an exit code from a smoke test, anything else is output
                if isinstance(result, int) and not isinstance(result, bool):
                    return result
                if result is not None:
                    print_result(result)
                return 0

        return asyncio.run(_run())

    wrapper.__signature__ = new_sig  # type: ignore
    # @wraps copied the client annotation, which only resolves under TYPE_CHECKING
    wrapper.__annotations__ = {k: v for k, v in func.__annotations__.items() if k != 'client'}
    return wrapper


# =============================================================================
# Category Discovery and Import
# =============================================================================

def import_all_categories():
    """Import all entity modules to trigger registration."""
    # The api package imports every module it contains
    from trellokit import api  # noqa: F401


# =============================================================================
# Main Entry Point
# =============================================================================

def run_action(func: Callable, args: list[str] | None = None) -> int:
    """Run an action function, parsing its options with defopt when argv is given."""
    wrapped = create_action_wrapper(func)
    return defopt.run(wrapped, argv=args) if args is not None else wrapped()


def main() -> int:
    """Main entry point."""
    global CONFIG

    import_all_categories()
    from .registry import get_actions, get_all_func, get_categories, list_actions

    CONFIG, remaining = parse_global_args(sys.argv[1:])
    configure_logging(CONFIG.verbose)

    if not remaining:
        cats = get_categories()
        print("Usage: trellokit [--key KEY --token TOKEN] <category> <action> [args...]", file=sys.stderr)
        print(f"Categories: {', '.join(sorted(cats)) or 'none'}", file=sys.stderr)
        return 1

    category, *remaining = remaining
    action = remaining[0] if remaining else "all"
    action_args = remaining[1:] if remaining else []

    try:
        if category == "all":
            return max((run_action(f) for c in sorted(get_categories()) if (f := get_all_func(c))), default=0)

        if category not in get_categories():
            print(f"Unknown category: {category}. Available: {', '.join(sorted(get_categories()))}", file=sys.stderr)
            return 1

        if action == "all":
            if func := get_all_func(category):
                return run_action(func)
            print(f"No 'all' action for {category}", file=sys.stderr)
            return 1

        actions = get_actions(category)
        if action not in actions:
            print(f"Unknown action: {action}. Available: {', '.join(list_actions(category))}", file=sys.stderr)
            return 1

        return run_action(actions[action], action_args)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        logfire.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
