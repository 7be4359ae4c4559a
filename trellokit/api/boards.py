"""Boards API endpoints."""

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

import logfire
from pydantic import Field

from trellokit.api.actions import Action, get_actions_for
from trellokit.api.cards import Card
from trellokit.api.checklists import Checklist, create_checklist
from trellokit.api.lists import CardList, create_list
from trellokit.errors import ValidationsFailed
from trellokit.models import TrelloModel
from trellokit.registry import action, all_action
from trellokit.resources import create, fetch, fetch_many, search
from trellokit.utils import compact_dict, get_ids, require_id

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class PowerUp(StrEnum):
    """Power-ups that can be toggled per board."""
    VOTING = 'voting'
    CARD_AGING = 'cardAging'
    CALENDAR = 'calendar'
    RECAP = 'recap'


class Board(TrelloModel):
    """Board model."""
    base_path: ClassVar[str] = 'boards'
    search_model: ClassVar[str | None] = 'boards'
    default_attributes: ClassVar[dict[str, Any]] = {'name': None}
    required_attributes: ClassVar[tuple[str, ...]] = ('name',)

    name: str | None = None
    desc: str | None = None
    desc_data: Any = Field(default=None, alias='descData')
    closed: bool | None = None
    id_organization: str | None = Field(default=None, alias='idOrganization')
    pinned: bool | None = None
    url: str | None = None
    short_url: str | None = Field(default=None, alias='shortUrl')
    prefs: dict[str, Any] | None = None
    label_names: dict[str, Any] | None = Field(default=None, alias='labelNames')


def is_valid_power_up(power_up: str | None) -> bool:
    """Check whether ``power_up`` names one of the board power-ups."""
    return power_up in set(PowerUp)


def _require_power_up(power_up: str | None, verb: str, preposition: str) -> str:
    if not is_valid_power_up(power_up):
        raise ValidationsFailed(
            f"attempted to {verb} invalid powerup {preposition} board; it's gotta be a valid powerup"
        )
    return str(power_up)


@action()
async def create_board(
    client: 'TrelloClient',
    *,
    name: str | None = None,
    desc: str | None = None,
    organization_id: str | None = None,
) -> Board:
    """
    Create a new board.

    :param name: Board name. Required.
    :param desc: Board description.
    :param organization_id: The ID of the organization the board belongs to.
    """
    return await create(client, Board, compact_dict(name=name, desc=desc, idOrganization=organization_id))


@action()
async def get_board(client: 'TrelloClient', *, board_id: str) -> Board:
    """
    Get a specific board by ID.

    :param board_id: The ID of the board.
    """
    return await fetch(client, Board, board_id)


@action()
async def add_checklist(client: 'TrelloClient', *, board_id: str, name: str | None = None) -> Checklist:
    """
    Add a checklist to a board.

    :param board_id: The ID of the board.
    :param name: The name of the checklist.
    """
    board_id = require_id(board_id, 'add checklist to', 'board')
    return await create_checklist(client, name=name, board_id=board_id)


@action()
async def add_list(client: 'TrelloClient', *, board_id: str, name: str | None = None) -> CardList:
    """
    Add a list to a board.

    :param board_id: The ID of the board.
    :param name: The name of the list.
    """
    board_id = require_id(board_id, 'add list to', 'board')
    return await create_list(client, board_id=board_id, name=name)


@action()
async def add_power_up(client: 'TrelloClient', *, board_id: str, power_up: str) -> Any:
    """
    Enable a power-up on a board.

    Returns the power-ups now enabled, as sent back by Trello.

    :param board_id: The ID of the board.
    :param power_up: One of voting, cardAging, calendar, recap.
    """
    power_up = _require_power_up(power_up, 'add', 'to')
    board_id = require_id(board_id, 'add powerup to', 'board')
    response = await client.post(Board.path(board_id, 'powerUps'), json={'value': power_up})
    logfire.info(f'Enabled power-up {power_up} on board {board_id}')
    return response.json


@action()
async def remove_power_up(client: 'TrelloClient', *, board_id: str, power_up: str) -> Any:
    """
    Disable a power-up on a board.

    :param board_id: The ID of the board.
    :param power_up: One of voting, cardAging, calendar, recap.
    """
    power_up = _require_power_up(power_up, 'remove', 'from')
    board_id = require_id(board_id, 'remove powerup from', 'board')
    response = await client.delete(Board.path(board_id, 'powerUps', power_up))
    logfire.info(f'Disabled power-up {power_up} on board {board_id}')
    return response.json


@action()
async def close_board(client: 'TrelloClient', *, board_id: str | None = None) -> bool:
    """
    Close a board.

    Returns the ``closed`` flag Trello reports after the update.

    :param board_id: The ID of the board to close.
    """
    board_id = require_id(board_id, 'close', 'board')
    closed = bool((await client.put(Board.path(board_id, 'closed'), json={'value': True})).get('closed'))
    if closed:
        logfire.info(f'Closed board {board_id}')
    else:
        logfire.warn(f'Board {board_id} still open after close request')
    return closed


@action()
async def generate_calendar_key(client: 'TrelloClient', *, board_id: str) -> Any:
    """
    Generate a new calendar feed key for a board.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'generate calendar key for', 'board')
    key = (await client.post(Board.path(board_id, 'calendarKey', 'generate'))).json
    logfire.info(f'Generated calendar key for board {board_id}')
    return key


@action()
async def generate_email_key(client: 'TrelloClient', *, board_id: str) -> Any:
    """
    Generate a new email-to-board key.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'generate email key for', 'board')
    key = (await client.post(Board.path(board_id, 'emailKey', 'generate'))).json
    logfire.info(f'Generated email key for board {board_id}')
    return key


@action()
async def mark_as_viewed(client: 'TrelloClient', *, board_id: str) -> Any:
    """
    Mark a board as viewed by the current member.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'mark as viewed', 'board')
    viewed = (await client.post(Board.path(board_id, 'markAsViewed'))).json
    logfire.info(f'Marked board {board_id} as viewed')
    return viewed


@action()
async def get_cards(client: 'TrelloClient', *, board_id: str) -> list[Card]:
    """
    Get every open card on a board, each fetched in full.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'list cards of', 'board')
    ids = get_ids((await client.get(Board.path(board_id, 'cards'))).json)
    return await fetch_many(client, Card, ids)


@action()
async def get_lists(client: 'TrelloClient', *, board_id: str) -> list[CardList]:
    """
    Get every open list on a board, each fetched in full.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'list lists of', 'board')
    ids = get_ids((await client.get(Board.path(board_id, 'lists'))).json)
    return await fetch_many(client, CardList, ids)


@action()
async def get_stars(client: 'TrelloClient', *, board_id: str) -> Any:
    """
    Get the stars members have put on a board.

    :param board_id: The ID of the board.
    """
    board_id = require_id(board_id, 'list stars of', 'board')
    return (await client.get(Board.path(board_id, 'boardStars'))).json


@action()
async def get_board_actions(client: 'TrelloClient', *, board_id: str) -> list[Action]:
    """
    Get the activity feed of a board.

    :param board_id: The ID of the board.
    """
    return await get_actions_for(client, Board, board_id)


@action()
async def search_boards(client: 'TrelloClient', *, query: str) -> list[Board]:
    """
    Search boards visible to the current member.

    :param query: Search terms.
    """
    return await search(client, Board, query)


@all_action
async def all(client: 'TrelloClient') -> int:
    """
    Smoke-test the boards API and close the board it creates.

    Trello has no hard delete for boards through this client, so cleanup closes it.
    """
    created_board = None

    try:
        logfire.info('Testing boards API')

        created_board = await create_board(client, name='trellokit smoke test (cleanup)')
        logfire.info(f'✓ Created board: {created_board.id} named "{created_board.name}"')

        board = await get_board(client, board_id=created_board.id)
        logfire.info(f'✓ Got board: {board.name}')

        card_list = await add_list(client, board_id=board.id, name='Smoke test list')
        logfire.info(f'✓ Added list: {card_list.id}')

        lists = await get_lists(client, board_id=board.id)
        logfire.info(f'✓ Board has {len(lists)} lists')

        cards = await get_cards(client, board_id=board.id)
        logfire.info(f'✓ Board has {len(cards)} cards')

        await add_power_up(client, board_id=board.id, power_up=PowerUp.VOTING)
        logfire.info('✓ Enabled voting power-up')
        await remove_power_up(client, board_id=board.id, power_up=PowerUp.VOTING)
        logfire.info('✓ Disabled voting power-up')

        actions = await get_board_actions(client, board_id=board.id)
        logfire.info(f'✓ Board has {len(actions)} actions')

        logfire.info('✓ All board tests passed!')
        return 0

    except Exception as e:
        logfire.error(f'✗ Board tests failed: {e}')
        return 1

    finally:
        if created_board:
            try:
                await close_board(client, board_id=created_board.id)
                logfire.info(f'✓ Closed test board: {created_board.id}')
            except Exception as cleanup_error:
                logfire.warn(f'Failed to close test board {created_board.id}: {cleanup_error}')
