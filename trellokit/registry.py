"""
Registry for Trello API actions.

Provides decorators for registering API functions as CLI actions.
Entity modules only need to decorate their functions - no CLI code needed.

Usage:
    from trellokit.registry import action, all_action

    @action()
    async def get_board(client, *, board_id: str) -> Board:
        '''Get a board.'''
        ...

    @action("close")  # Custom action name
    async def close_board(client, *, board_id: str) -> bool:
        '''Close a board.'''
        ...

    @all_action
    async def all(client) -> int:
        '''Smoke-test the category and clean up created resources.'''
        ...
"""

from __future__ import annotations

from typing import Callable, TypeVar

F = TypeVar('F', bound=Callable)

# Registry: {category_name: {action_name: func}}
_actions: dict[str, dict[str, Callable]] = {}

# Smoke tests: {category_name: func}
_all_funcs: dict[str, Callable] = {}


def _category_of(func: Callable) -> str:
    # trellokit.api.boards -> boards
    return func.__module__.split('.')[-1]


def _derive_action_name(func_name: str, category: str) -> str:
    """
    Strip the category from a function name.

    ``get_board`` in boards becomes ``get``, ``board_stars`` becomes ``stars``.
    The singular form is tried too, since functions are named after one entity.
    """
    singular = category[:-1] if category.endswith('s') else category
    for noun in (category, singular):
        prefix, suffix = f'{noun}_', f'_{noun}'
        if func_name.startswith(prefix):
            return func_name[len(prefix):]
        if func_name.endswith(suffix):
            return func_name[:-len(suffix)]
    return func_name


def action(name: str | None = None):
    """
    Register a function as a CLI action.

    The function will be exposed as a CLI command under its category.
    The first argument must be `client` - it will be injected by the CLI.
    All other arguments become CLI options.

    Args:
        name: Optional custom action name. If not provided, uses the function name
              with the category removed, e.g. `get_board` in boards.py becomes `get`.

    Example:
        @action()
        async def get_board(client, *, board_id: str) -> Board:
            '''Get a board.'''
            return (await client.get(f'boards/{board_id}')).as_model(Board)

        # CLI: trellokit boards get --board-id abc123
    """
    def decorator(func: F) -> F:
        category = _category_of(func)
        action_name = name or _derive_action_name(func.__name__, category)
        _actions.setdefault(category, {})[action_name] = func
        return func
    return decorator


def all_action(func: F) -> F:
    """
    Register a function as the 'all' action for a category.

    The function runs a live smoke test for the category and should:
    1. Create any required test resources
    2. Run the category's operations
    3. Clean up created resources (even on failure)

    It takes only `client` and returns an exit code (0 for success).

    # CLI: trellokit boards all
    """
    _all_funcs[_category_of(func)] = func
    return func


def get_actions(category: str) -> dict[str, Callable]:
    """Get all registered actions for a category."""
    return _actions.get(category, {})


def get_all_func(category: str) -> Callable | None:
    """Get the 'all' function for a category."""
    return _all_funcs.get(category)


def get_categories() -> list[str]:
    """Get all registered categories."""
    return list(set(_actions.keys()) | set(_all_funcs.keys()))


def list_actions(category: str) -> list[str]:
    """List all available actions for a category."""
    actions = list(get_actions(category).keys())
    if category in _all_funcs:
        actions.insert(0, 'all')
    return actions
