"""Pytest configuration: a fake Trello API behind httpx.MockTransport."""

import json

import httpx
import logfire
import pytest

from trellokit.client import TrelloClient, TrelloClientConfig

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


class FakeTrello:
    """
    Routes ``(method, path)`` to canned JSON and records every request.

    Paths are relative to the API root, e.g. ``('GET', 'boards/b1')``.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, body: object, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix('/1/')
        status, body = self.routes.get((request.method, path), (404, {'message': 'not found'}))
        return httpx.Response(status, json=body)

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path.removeprefix('/1/')) for r in self.requests]

    def body(self, index: int) -> object:
        return json.loads(self.requests[index].content)

    def client(self) -> TrelloClient:
        config = TrelloClientConfig(api_key='test-key', token='test-token')
        return TrelloClient(config, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def trello():
    return FakeTrello()
