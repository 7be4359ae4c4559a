"""
Base models for Trello API responses.

Provides APIModel base class with camelCase alias support, and TrelloModel
for entities that live under a fixed base path.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """
    Base model for all API responses.

    Features:
    - populate_by_name=True: Allows both camelCase and snake_case field access
    - Use Field(alias='camelCase') for API fields that use camelCase

    Example:
        class Board(APIModel):
            id_organization: str | None = Field(default=None, alias='idOrganization')

        # Both work:
        board = Board(idOrganization='123')
        board = Board(id_organization='123')
    """
    model_config = ConfigDict(populate_by_name=True)


class TrelloModel(APIModel):
    """
    Base model for Trello entities.

    Subclasses declare where they live and what a create request needs:

        class Board(TrelloModel):
            base_path: ClassVar[str] = 'boards'
            required_attributes: ClassVar[tuple[str, ...]] = ('name',)
    """
    base_path: ClassVar[str] = ''
    search_model: ClassVar[str | None] = None
    default_attributes: ClassVar[dict[str, Any]] = {}
    required_attributes: ClassVar[tuple[str, ...]] = ()

    id: str

    @classmethod
    def path(cls, *parts: str) -> str:
        """Join the base path with extra segments, e.g. ``boards/abc/cards``."""
        return '/'.join([cls.base_path, *parts])
