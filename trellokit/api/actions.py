"""Actions API endpoints."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field

from trellokit.models import TrelloModel
from trellokit.registry import action
from trellokit.resources import fetch, list_related

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class Action(TrelloModel):
    """Action model: one entry of an activity feed."""
    base_path: ClassVar[str] = 'actions'

    id_member_creator: str | None = Field(default=None, alias='idMemberCreator')
    data: dict[str, Any] | None = None
    type: str | None = None
    date: str | None = None
    member_creator: dict[str, Any] | None = Field(default=None, alias='memberCreator')


async def get_actions_for(client: 'TrelloClient', owner_cls: type[TrelloModel], owner_id: str | None) -> list[Action]:
    """
    Get the activity feed of any entity that has one (boards, cards, members).

    :param owner_cls: Model class of the owning entity.
    :param owner_id: The ID of the owning entity.
    """
    return await list_related(client, owner_cls, owner_id, 'actions', Action)


@action()
async def get_action(client: 'TrelloClient', *, action_id: str) -> Action:
    """
    Get a specific action by ID.

    :param action_id: The ID of the action.
    """
    return await fetch(client, Action, action_id)
