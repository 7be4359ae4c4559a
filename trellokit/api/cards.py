"""Cards API endpoints."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field

from trellokit.api.actions import Action, get_actions_for
from trellokit.models import TrelloModel
from trellokit.registry import action
from trellokit.resources import create, fetch, search
from trellokit.utils import compact_dict

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class Card(TrelloModel):
    """Card model."""
    base_path: ClassVar[str] = 'cards'
    search_model: ClassVar[str | None] = 'cards'
    required_attributes: ClassVar[tuple[str, ...]] = ('idList',)

    name: str | None = None
    desc: str | None = None
    closed: bool | None = None
    id_board: str | None = Field(default=None, alias='idBoard')
    id_list: str | None = Field(default=None, alias='idList')
    id_members: list[str] | None = Field(default=None, alias='idMembers')
    id_labels: list[str] | None = Field(default=None, alias='idLabels')
    id_checklists: list[str] | None = Field(default=None, alias='idChecklists')
    labels: list[dict[str, Any]] | None = None
    pos: float | None = None
    due: str | None = None
    url: str | None = None
    short_url: str | None = Field(default=None, alias='shortUrl')
    date_last_activity: str | None = Field(default=None, alias='dateLastActivity')


@action()
async def get_card(client: 'TrelloClient', *, card_id: str) -> Card:
    """
    Get a specific card by ID.

    :param card_id: The ID of the card.
    """
    return await fetch(client, Card, card_id)


@action()
async def create_card(
    client: 'TrelloClient',
    *,
    list_id: str | None = None,
    name: str | None = None,
    desc: str | None = None,
    due: str | None = None,
) -> Card:
    """
    Create a new card in a list.

    :param list_id: The ID of the list the card goes into.
    :param name: Card name.
    :param desc: Card description.
    :param due: Due date, ISO 8601.
    """
    return await create(client, Card, compact_dict(idList=list_id, name=name, desc=desc, due=due))


@action()
async def get_card_actions(client: 'TrelloClient', *, card_id: str) -> list[Action]:
    """
    Get the activity feed of a card.

    :param card_id: The ID of the card.
    """
    return await get_actions_for(client, Card, card_id)


@action()
async def search_cards(client: 'TrelloClient', *, query: str) -> list[Card]:
    """
    Search cards visible to the current member.

    :param query: Search terms.
    """
    return await search(client, Card, query)
