"""
Generic entity plumbing shared by every API module.

Each function works off the ClassVars declared on a TrelloModel subclass,
so the per-entity modules only add their endpoint-specific calls.
"""

from typing import TYPE_CHECKING, Any, Iterable, TypeVar

import logfire

from trellokit.errors import ValidationsFailed
from trellokit.models import TrelloModel
from trellokit.utils import require_fields, require_id

if TYPE_CHECKING:
    from trellokit.client import TrelloClient

T = TypeVar('T', bound=TrelloModel)


def _entity_name(model_cls: type[TrelloModel]) -> str:
    return model_cls.__name__.lower()


async def fetch(client: 'TrelloClient', model_cls: type[T], resource_id: str | None) -> T:
    """
    GET ``{base_path}/{id}`` and parse it into ``model_cls``.

    Raises:
        ValidationsFailed: When ``resource_id`` is empty
    """
    resource_id = require_id(resource_id, 'fetch', _entity_name(model_cls))
    return (await client.get(model_cls.path(resource_id))).as_model(model_cls)


async def fetch_many(client: 'TrelloClient', model_cls: type[T], ids: Iterable[str]) -> list[T]:
    """
    Fetch every id in turn, one GET per id, preserving the given order.

    No request is made for an empty ``ids``.
    """
    return [await fetch(client, model_cls, resource_id) for resource_id in ids]


async def create(
    client: 'TrelloClient',
    model_cls: type[T],
    attributes: dict[str, Any] | None = None,
) -> T:
    """
    POST a new entity to ``{base_path}``.

    Caller attributes are laid over ``default_attributes``; every key in
    ``required_attributes`` must then be non-empty or nothing is sent.

    Raises:
        ValidationsFailed: When a required attribute is missing
    """
    payload = {**model_cls.default_attributes, **(attributes or {})}
    require_fields(payload, model_cls.required_attributes, _entity_name(model_cls))
    created = (await client.post(model_cls.path(), json=payload)).as_model(model_cls)
    logfire.info(f'Created {_entity_name(model_cls)} {created.id}')
    return created


async def search(client: 'TrelloClient', model_cls: type[T], query: str) -> list[T]:
    """
    Run a Trello search restricted to ``model_cls``.

    Raises:
        ValidationsFailed: When ``query`` is empty or the model is not searchable
    """
    if not model_cls.search_model:
        raise ValidationsFailed(f"{_entity_name(model_cls)} is not searchable")
    if not query:
        raise ValidationsFailed("attempted to search without a query; it's gotta have a query")
    params = {'query': query, 'modelTypes': model_cls.search_model}
    return (await client.get('search', params=params)).as_list(model_cls, model_cls.search_model)


async def list_related(
    client: 'TrelloClient',
    owner_cls: type[TrelloModel],
    owner_id: str | None,
    related: str,
    model_cls: type[T],
) -> list[T]:
    """GET ``{owner base}/{owner_id}/{related}`` and parse the array into ``model_cls``."""
    owner_id = require_id(owner_id, f'list {related} of', _entity_name(owner_cls))
    return (await client.get(owner_cls.path(owner_id, related))).as_list(model_cls)
