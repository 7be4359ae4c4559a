"""Cards, lists, checklists, actions and organizations tests"""

import pytest

from trellokit.api.actions import get_action
from trellokit.api.cards import create_card, get_card, get_card_actions, search_cards
from trellokit.api.checklists import create_checklist, get_checklist
from trellokit.api.lists import CardList, create_list, get_list, get_list_cards
from trellokit.api.organizations import get_organization, get_organization_boards, search_organizations
from trellokit.errors import ValidationsFailed


class TestCards:
    """cards"""

    @pytest.mark.asyncio
    async def test_get_card(self, trello):
        trello.add('GET', 'cards/k1', {
            'id': 'k1', 'name': 'Write docs', 'idList': 'l1', 'idBoard': 'b1',
            'idMembers': ['m1'], 'labels': [{'id': 'lb1', 'color': 'green'}], 'pos': 16384,
        })
        async with trello.client() as client:
            card = await get_card(client, card_id='k1')

        assert card.id_list == 'l1'
        assert card.id_members == ['m1']
        assert card.pos == 16384

    @pytest.mark.asyncio
    async def test_create_card_requires_list(self, trello):
        async with trello.client() as client:
            with pytest.raises(ValidationsFailed, match='idList'):
                await create_card(client, name='Orphan')
        assert trello.requests == []

    @pytest.mark.asyncio
    async def test_create_card(self, trello):
        trello.add('POST', 'cards', {'id': 'k1', 'name': 'Write docs', 'idList': 'l1'})
        async with trello.client() as client:
            card = await create_card(client, list_id='l1', name='Write docs')

        assert card.id == 'k1'
        assert trello.body(0) == {'idList': 'l1', 'name': 'Write docs'}

    @pytest.mark.asyncio
    async def test_card_actions_and_search(self, trello):
        trello.add('GET', 'cards/k1/actions', [{'id': 'a1', 'type': 'updateCard'}])
        trello.add('GET', 'search', {'cards': [{'id': 'k1'}]})
        async with trello.client() as client:
            assert [a.id for a in await get_card_actions(client, card_id='k1')] == ['a1']
            assert [c.id for c in await search_cards(client, query='docs')] == ['k1']


class TestLists:
    """lists"""

    @pytest.mark.asyncio
    async def test_get_list_and_cards(self, trello):
        trello.add('GET', 'lists/l1', {'id': 'l1', 'name': 'Doing', 'closed': False, 'idBoard': 'b1'})
        trello.add('GET', 'lists/l1/cards', [{'id': 'k1', 'idList': 'l1'}])
        async with trello.client() as client:
            card_list = await get_list(client, list_id='l1')
            cards = await get_list_cards(client, list_id='l1')

        assert card_list.name == 'Doing'
        assert [c.id for c in cards] == ['k1']

    def test_closed_unknown_when_absent(self):
        assert CardList(id='l1', name='Doing').closed is None
        assert CardList(id='l1', closed=False).closed is False

    @pytest.mark.asyncio
    async def test_create_list_requires_board(self, trello):
        async with trello.client() as client:
            with pytest.raises(ValidationsFailed, match='idBoard'):
                await create_list(client, name='Doing')
        assert trello.requests == []


class TestChecklists:
    """checklists"""

    @pytest.mark.asyncio
    async def test_create_requires_owner(self, trello):
        async with trello.client() as client:
            with pytest.raises(ValidationsFailed, match='idBoard, idCard'):
                await create_checklist(client, name='Launch')
        assert trello.requests == []

    @pytest.mark.asyncio
    async def test_create_on_card(self, trello):
        trello.add('POST', 'checklists', {'id': 'c1', 'name': 'Launch', 'idCard': 'k1', 'checkItems': []})
        async with trello.client() as client:
            checklist = await create_checklist(client, name='Launch', card_id='k1')

        assert checklist.id_card == 'k1'
        assert trello.body(0) == {'name': 'Launch', 'idCard': 'k1'}

    @pytest.mark.asyncio
    async def test_get_checklist(self, trello):
        trello.add('GET', 'checklists/c1', {'id': 'c1', 'checkItems': [{'id': 'i1', 'state': 'complete'}]})
        async with trello.client() as client:
            checklist = await get_checklist(client, checklist_id='c1')

        assert checklist.check_items == [{'id': 'i1', 'state': 'complete'}]


class TestActions:
    """actions"""

    @pytest.mark.asyncio
    async def test_get_action(self, trello):
        trello.add('GET', 'actions/a1', {
            'id': 'a1', 'type': 'createBoard', 'memberCreator': {'id': 'm1', 'username': 'ada'},
        })
        async with trello.client() as client:
            found = await get_action(client, action_id='a1')

        assert found.member_creator == {'id': 'm1', 'username': 'ada'}


class TestOrganizations:
    """organizations"""

    @pytest.mark.asyncio
    async def test_get_organization_and_boards(self, trello):
        trello.add('GET', 'organizations/acme', {'id': 'o1', 'name': 'acme', 'idBoards': ['b1']})
        trello.add('GET', 'organizations/acme/boards', [{'id': 'b1', 'name': 'Roadmap'}])
        async with trello.client() as client:
            organization = await get_organization(client, organization_id='acme')
            boards = await get_organization_boards(client, organization_id='acme')

        assert organization.id_boards == ['b1']
        assert [b.name for b in boards] == ['Roadmap']

    @pytest.mark.asyncio
    async def test_search_organizations(self, trello):
        trello.add('GET', 'search', {'organizations': [{'id': 'o1', 'displayName': 'Acme'}]})
        async with trello.client() as client:
            organizations = await search_organizations(client, query='acme')

        assert organizations[0].display_name == 'Acme'
        assert trello.requests[0].url.params['modelTypes'] == 'organizations'
