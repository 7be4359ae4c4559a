"""Members API endpoints."""

from typing import TYPE_CHECKING, Any, ClassVar

import logfire
from pydantic import Field

from trellokit.api.actions import Action, get_actions_for
from trellokit.api.organizations import Organization
from trellokit.models import TrelloModel
from trellokit.registry import action, all_action
from trellokit.resources import fetch, fetch_many
from trellokit.utils import get_ids

if TYPE_CHECKING:
    from trellokit.client import TrelloClient


class Member(TrelloModel):
    """Member model."""
    base_path: ClassVar[str] = 'members'

    avatar_hash: str | None = Field(default=None, alias='avatarHash')
    bio: str | None = None
    bio_data: Any = Field(default=None, alias='bioData')
    confirmed: bool | None = None
    full_name: str | None = Field(default=None, alias='fullName')
    id_prem_orgs_admin: list[str] | None = Field(default=None, alias='idPremOrgsAdmin')
    initials: str | None = None
    member_type: str | None = Field(default=None, alias='memberType')
    products: list[Any] | None = None
    status: str | None = None
    url: str | None = None
    username: str | None = None
    avatar_source: str | None = Field(default=None, alias='avatarSource')
    gravatar_hash: str | None = Field(default=None, alias='gravatarHash')
    id_boards: list[str] | None = Field(default=None, alias='idBoards')
    id_organizations: list[str] | None = Field(default=None, alias='idOrganizations')
    login_types: Any = Field(default=None, alias='loginTypes')
    one_time_messages_dismissed: list[str] | None = Field(default=None, alias='oneTimeMessagesDismissed')
    prefs: dict[str, Any] | None = None
    trophies: list[Any] | None = None
    uploaded_avatar_hash: str | None = Field(default=None, alias='uploadedAvatarHash')
    premium_features: list[Any] | None = Field(default=None, alias='premiumFeatures')
    id_boards_pinned: Any = Field(default=None, alias='idBoardsPinned')


@action()
async def current_user(client: 'TrelloClient') -> Member:
    """
    Get the member the token belongs to.
    """
    return (await client.get(Member.path('me'))).as_model(Member)


@action()
async def current_user_organizations(client: 'TrelloClient') -> list[Organization]:
    """
    Get the organizations of the current member, each fetched in full.

    Organizations come back in the order Trello lists them.
    """
    ids = get_ids((await client.get(Member.path('my', 'organizations'))).json)
    return await fetch_many(client, Organization, ids)


@action()
async def get_member(client: 'TrelloClient', *, member_id: str) -> Member:
    """
    Get a specific member by ID or username.

    :param member_id: The ID or username of the member.
    """
    return await fetch(client, Member, member_id)


@action()
async def get_member_actions(client: 'TrelloClient', *, member_id: str) -> list[Action]:
    """
    Get the activity feed of a member.

    :param member_id: The ID or username of the member.
    """
    return await get_actions_for(client, Member, member_id)


@all_action
async def all(client: 'TrelloClient') -> int:
    """
    Smoke-test the read-only members API.
    """
    try:
        logfire.info('Testing members API')

        me = await current_user(client)
        logfire.info(f'✓ Current user: {me.username} ({me.id})')

        member = await get_member(client, member_id=me.id)
        logfire.info(f'✓ Got member: {member.full_name}')

        organizations = await current_user_organizations(client)
        logfire.info(f'✓ Member belongs to {len(organizations)} organizations')

        actions = await get_member_actions(client, member_id=me.id)
        logfire.info(f'✓ Member has {len(actions)} actions')

        logfire.info('✓ All member tests passed!')
        return 0

    except Exception as e:
        logfire.error(f'✗ Member tests failed: {e}')
        return 1
