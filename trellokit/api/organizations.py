"""Organizations API endpoints."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field

from trellokit.api.boards import Board
from trellokit.models import TrelloModel
from trellokit.registry import action
from trellokit.resources import fetch, list_related, search

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class Organization(TrelloModel):
    """Organization (workspace) model."""
    base_path: ClassVar[str] = 'organizations'
    search_model: ClassVar[str | None] = 'organizations'

    name: str | None = None
    display_name: str | None = Field(default=None, alias='displayName')
    desc: str | None = None
    url: str | None = None
    website: str | None = None
    logo_hash: str | None = Field(default=None, alias='logoHash')
    id_boards: list[str] | None = Field(default=None, alias='idBoards')
    prefs: dict[str, Any] | None = None
    power_ups: list[Any] | None = Field(default=None, alias='powerUps')


@action()
async def get_organization(client: 'TrelloClient', *, organization_id: str) -> Organization:
    """
    Get a specific organization by ID or name.

    :param organization_id: The ID or short name of the organization.
    """
    return await fetch(client, Organization, organization_id)


@action()
async def get_organization_boards(client: 'TrelloClient', *, organization_id: str) -> list[Board]:
    """
    Get the boards of an organization.

    :param organization_id: The ID or short name of the organization.
    """
    return await list_related(client, Organization, organization_id, 'boards', Board)


@action()
async def search_organizations(client: 'TrelloClient', *, query: str) -> list[Organization]:
    """
    Search organizations visible to the current member.

    :param query: Search terms.
    """
    return await search(client, Organization, query)
