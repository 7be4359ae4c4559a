"""
Trello API Client

Handles credentials and base HTTP client configuration.
"""

from typing import Any, TypeVar

import httpx
import logfire

from trellokit.models import APIModel

T = TypeVar('T', bound=APIModel)

TRELLO_API_URL = "https://api.trello.com/1"


class APIResponse:
    """
    Wrapper around httpx.Response with JSON parsing helpers.

    Provides convenient methods for parsing API responses into models.
    Trello answers with either a JSON object or a JSON array, so ``json``
    may be a dict, a list, or None for an empty body.
    """

    def __init__(self, response: httpx.Response):
        self._response = response
        self._json: Any = None
        try:
            self._json = self._response.json()
        except ValueError:
            logfire.warn("Response body is not valid JSON, treating it as empty.")
            return
        # Some gateways answer 200 with the error embedded in the body
        if isinstance(self._json, dict) and isinstance(self._json.get("statusCode"), int) \
                and self._json["statusCode"] >= 400:
            error_message = self._json.get("message", self._json.get("error", "Unknown API Error"))
            raise httpx.HTTPStatusError(
                message=f"API Error {self._json['statusCode']}: {error_message}",
                request=response.request,
                response=response,
            )

    @property
    def response(self) -> httpx.Response:
        """Access the underlying httpx.Response."""
        return self._response

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        return self._response.status_code

    @property
    def json(self) -> Any:
        """Parsed JSON body (parsed once, in __init__)."""
        return self._json

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from a JSON object response."""
        if isinstance(self._json, dict):
            return self._json.get(key, default)
        return default

    def as_model(self, model_cls: type[T], *keys: str) -> T:
        """
        Parse response as a single model instance.

        Args:
            model_cls: The Pydantic model class to parse into
            *keys: Keys to try in order. If none provided, parses root object.

        Example:
            # Response: {"id": "...", "name": "..."}
            board = response.as_model(Board)
        """
        data = self._json if isinstance(self._json, dict) else {}
        for key in keys:
            if isinstance(data.get(key), dict):
                return model_cls.model_validate(data[key])
        return model_cls.model_validate(data)

    def as_list(self, model_cls: type[T], key: str | None = None) -> list[T]:
        """
        Parse response as a list of model instances.

        Args:
            model_cls: The Pydantic model class to parse each item into
            key: The key containing the list. If None, the root must be an array.

        Example:
            # Response: [{...}, {...}]
            actions = response.as_list(Action)

            # Response: {"boards": [{...}, {...}]}
            boards = response.as_list(Board, 'boards')
        """
        items = self._json if key is None else self.get(key, [])
        if not isinstance(items, list):
            return []
        return [model_cls.model_validate(item) for item in items]


class TrelloClientConfig(APIModel):
    """Configuration for Trello API client."""

    base_url: str = TRELLO_API_URL
    """Base URL of the Trello REST API."""

    api_key: str | None = None
    """Developer API key, sent as the ``key`` query parameter."""

    token: str | None = None
    """Member token, sent as the ``token`` query parameter."""

    timeout: float = 30.0
    verify_ssl: bool = True


class TrelloClient:
    """
    HTTP client for Trello API.

    Handles credentials and base configuration.

    Usage:
        config = TrelloClientConfig(api_key="...", token="...")
        async with TrelloClient(config) as client:
            # GET request (default method)
            me = (await client.get('members/me')).as_model(Member)

            # POST request
            board = (await client.post('boards', json={'name': 'Roadmap'})).as_model(Board)
    """

    def __init__(self, config: TrelloClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        """
        Initialize the client.

        Args:
            config: Client configuration
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config
        self.client = self._create_client(transport)

    def _create_client(self, transport: httpx.AsyncBaseTransport | None) -> httpx.AsyncClient:
        """Create the HTTP client with credentials."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        params: dict[str, str] = {}
        if self.config.api_key:
            params["key"] = self.config.api_key
            logfire.debug("Sending key query parameter.")
        if self.config.token:
            params["token"] = self.config.token
            logfire.debug("Sending token query parameter.")

        return httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=headers,
            params=params,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    def _resolve_endpoint(self, endpoint: str) -> str:
        """Resolve endpoint path.

        Paths are relative to the API version root, so a leading slash is
        dropped: ``/boards/abc`` and ``boards/abc`` both hit ``{base_url}/boards/abc``.
        """
        return endpoint.lstrip('/')

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        **kwargs: Any
    ) -> httpx.Response:
        """
        Make an authenticated request.

        Args:
            endpoint: API endpoint path relative to the base URL
            method: HTTP method (GET, POST, PUT, DELETE). Defaults to GET.
            **kwargs: Additional arguments to pass to httpx

        Returns:
            Response object

        Raises:
            httpx.HTTPStatusError: On any non-2xx response
        """
        resolved = self._resolve_endpoint(endpoint)
        logfire.debug(f"{method} {resolved}", method=method, endpoint=resolved)
        response = await self.client.request(method, resolved, **kwargs)
        response.raise_for_status()
        return response

    async def get(self, endpoint: str, **kwargs: Any) -> APIResponse:
        """
        Make a GET request and return wrapped response.

        Args:
            endpoint: API endpoint path
            **kwargs: Additional arguments (params, headers, etc.)

        Returns:
            APIResponse wrapper with parsing helpers
        """
        return APIResponse(await self.request(endpoint, "GET", **kwargs))

    async def post(self, endpoint: str, **kwargs: Any) -> APIResponse:
        """
        Make a POST request and return wrapped response.

        Args:
            endpoint: API endpoint path
            **kwargs: Additional arguments (json, data, headers, etc.)

        Returns:
            APIResponse wrapper with parsing helpers
        """
        return APIResponse(await self.request(endpoint, "POST", **kwargs))

    async def put(self, endpoint: str, **kwargs: Any) -> APIResponse:
        """
        Make a PUT request and return wrapped response.

        Args:
            endpoint: API endpoint path
            **kwargs: Additional arguments (json, data, headers, etc.)

        Returns:
            APIResponse wrapper with parsing helpers
        """
        return APIResponse(await self.request(endpoint, "PUT", **kwargs))

    async def delete(self, endpoint: str, **kwargs: Any) -> APIResponse:
        """
        Make a DELETE request and return wrapped response.

        Args:
            endpoint: API endpoint path
            **kwargs: Additional arguments

        Returns:
            APIResponse wrapper with parsing helpers
        """
        return APIResponse(await self.request(endpoint, "DELETE", **kwargs))
