# trellokit/api/checklists.py
"""Checklists API endpoints."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field

from trellokit.models import TrelloModel
from trellokit.registry import action
from trellokit.resources import create, fetch
from trellokit.utils import compact_dict, require_one_of

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class Checklist(TrelloModel):
    """Checklist model."""
    base_path: ClassVar[str] = 'checklists'
    required_attributes: ClassVar[tuple[str, ...]] = ('name',)

    name: str | None = None
    id_board: str | None = Field(default=None, alias='idBoard')
    id_card: str | None = Field(default=None, alias='idCard')
    pos: float | None = None
    check_items: list[dict[str, Any]] | None = Field(default=None, alias='checkItems')


@action()
async def get_checklist(client: 'TrelloClient', *, checklist_id: str) -> Checklist:
    """
    Get a specific checklist by ID.

    :param checklist_id: The ID of the checklist.
    """
    return await fetch(client, Checklist, checklist_id)


@action()
async def create_checklist(
    client: 'TrelloClient',
    *,
    name: str | None = None,
    board_id: str | None = None,
    card_id: str | None = None,
) -> Checklist:
    """
    Create a checklist attached to a board or a card.

    :param name: The name of the checklist.
    :param board_id: The ID of the owning board.
    :param card_id: The ID of the owning card.
    """
    owner = require_one_of(idBoard=board_id, idCard=card_id)
    return await create(client, Checklist, {**compact_dict(name=name), **owner})
