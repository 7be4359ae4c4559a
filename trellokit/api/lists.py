"""Lists API endpoints."""

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from trellokit.api.cards import Card
from trellokit.models import TrelloModel
from trellokit.registry import action
from trellokit.resources import create, fetch, list_related
from trellokit.utils import compact_dict

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class CardList(TrelloModel):
    """List model. Named CardList to stay clear of the builtin."""
    base_path: ClassVar[str] = 'lists'
    required_attributes: ClassVar[tuple[str, ...]] = ('name', 'idBoard')

    name: str | None = None
    closed: bool | None = None
    id_board: str | None = Field(default=None, alias='idBoard')
    pos: float | None = None
    subscribed: bool | None = None


@action()
async def get_list(client: 'TrelloClient', *, list_id: str) -> CardList:
    """
    Get a specific list by ID.

    :param list_id: The ID of the list.
    """
    return await fetch(client, CardList, list_id)


@action()
async def create_list(
    client: 'TrelloClient',
    *,
    board_id: str | None = None,
    name: str | None = None,
    pos: str | None = None,
) -> CardList:
    """
    Create a new list on a board.

    :param board_id: The ID of the board.
    :param name: The name of the new list.
    :param pos: Position: 'top', 'bottom' or a positive number.
    """
    return await create(client, CardList, compact_dict(name=name, idBoard=board_id, pos=pos))


@action()
async def get_list_cards(client: 'TrelloClient', *, list_id: str) -> list[Card]:
    """
    Get the open cards of a list.

    :param list_id: The ID of the list.
    """
    return await list_related(client, CardList, list_id, 'cards', Card)
