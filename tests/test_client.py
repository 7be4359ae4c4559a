"""TrelloClient and APIResponse tests"""

import httpx
import pytest

from trellokit.api.boards import Board
from trellokit.client import APIResponse, TRELLO_API_URL, TrelloClientConfig


class TestTrelloClientConfig:
    """Configuration defaults"""

    def test_defaults(self):
        config = TrelloClientConfig()
        assert config.base_url == TRELLO_API_URL
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.api_key is None


class TestTrelloClient:
    """Request plumbing against the fake API"""

    @pytest.mark.asyncio
    async def test_credentials_sent_as_query_params(self, trello):
        trello.add('GET', 'boards/b1', {'id': 'b1'})
        async with trello.client() as client:
            await client.get('boards/b1')

        params = trello.requests[0].url.params
        assert params['key'] == 'test-key'
        assert params['token'] == 'test-token'

    @pytest.mark.asyncio
    async def test_leading_slash_is_ignored(self, trello):
        trello.add('GET', 'boards/b1', {'id': 'b1'})
        async with trello.client() as client:
            await client.get('/boards/b1')

        assert str(trello.requests[0].url).startswith('https://api.trello.com/1/boards/b1')

    @pytest.mark.asyncio
    async def test_error_status_propagates(self, trello):
        trello.add('GET', 'boards/b1', {'message': 'invalid id'}, status=400)
        async with trello.client() as client:
            with pytest.raises(httpx.HTTPStatusError) as excinfo:
                await client.get('boards/b1')

        assert excinfo.value.response.status_code == 400

    @pytest.mark.asyncio
    async def test_request_params_merge_with_credentials(self, trello):
        trello.add('GET', 'search', {'boards': []})
        async with trello.client() as client:
            await client.get('search', params={'query': 'x'})

        params = trello.requests[0].url.params
        assert params['query'] == 'x'
        assert params['token'] == 'test-token'


def _response(status: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request('GET', 'https://api.trello.com/1/x'), **kwargs)


class TestAPIResponse:
    """JSON parsing helpers"""

    def test_as_model_from_root_object(self):
        response = APIResponse(_response(json={'id': 'b1', 'name': 'Roadmap', 'idOrganization': 'o1'}))
        board = response.as_model(Board)
        assert board.name == 'Roadmap'
        assert board.id_organization == 'o1'

    def test_as_list_from_root_array(self):
        response = APIResponse(_response(json=[{'id': 'b1'}, {'id': 'b2'}]))
        assert [b.id for b in response.as_list(Board)] == ['b1', 'b2']

    def test_as_list_from_key(self):
        response = APIResponse(_response(json={'boards': [{'id': 'b1'}]}))
        assert [b.id for b in response.as_list(Board, 'boards')] == ['b1']

    def test_as_list_on_object_without_key_is_empty(self):
        response = APIResponse(_response(json={'id': 'b1'}))
        assert response.as_list(Board) == []

    def test_get_on_array_returns_default(self):
        response = APIResponse(_response(json=['voting']))
        assert response.get('closed', False) is False

    def test_non_json_body_is_empty(self):
        response = APIResponse(_response(text='OK'))
        assert response.json is None

    def test_embedded_error_status_raises(self):
        with pytest.raises(httpx.HTTPStatusError, match='API Error 401'):
            APIResponse(_response(json={'statusCode': 401, 'message': 'unauthorized'}))
