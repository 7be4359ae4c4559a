"""
Utility functions for trellokit.

Provides helpers for common API patterns.
"""

from typing import Any, Iterable, Mapping

from trellokit.errors import ValidationsFailed


def compact_dict(**kwargs: Any) -> dict[str, Any]:
    """
    Build a dictionary excluding None values.

    Useful for building API params/payloads where None means "omit field".

    Example:
        # Instead of:
        payload: dict[str, Any] = {}
        if name:
            payload['name'] = name
        if desc:
            payload['desc'] = desc

        # Use:
        payload = compact_dict(name=name, desc=desc)

    Args:
        **kwargs: Key-value pairs to include (None values are excluded)

    Returns:
        Dict with only non-None values
    """
    return {k: v for k, v in kwargs.items() if v is not None}


def require_one_of(**kwargs: Any) -> dict[str, Any]:
    """
    Build a compact dict, but raise ValidationsFailed if all values are None.

    Useful for API endpoints that require at least one identifier.

    Example:
        params = require_one_of(idBoard=board_id, idCard=card_id)
        # Raises ValidationsFailed if both are None

    Args:
        **kwargs: Key-value pairs (at least one must be non-None)

    Returns:
        Dict with only non-None values

    Raises:
        ValidationsFailed: If all values are None
    """
    result = compact_dict(**kwargs)
    if not result:
        keys = ', '.join(kwargs.keys())
        raise ValidationsFailed(f"At least one of ({keys}) must be provided")
    return result


def require_fields(attributes: Mapping[str, Any], required: Iterable[str], entity: str) -> None:
    """
    Raise ValidationsFailed unless every required key holds a non-empty value.

    Args:
        attributes: Payload about to be sent
        required: Keys that must be present
        entity: Entity name used in the error message

    Raises:
        ValidationsFailed: Listing every missing key
    """
    missing = [key for key in required if attributes.get(key) in (None, '')]
    if missing:
        raise ValidationsFailed(
            f"attempted to create {entity} without {', '.join(missing)}; it's gotta have {' and '.join(missing)}"
        )


def require_id(value: str | None, action: str, entity: str) -> str:
    """Return ``value`` or raise ValidationsFailed when it is empty."""
    if not value:
        raise ValidationsFailed(f"attempted to {action} {entity} without id; it's gotta have an id")
    return value


def get_ids(payload: Any) -> list[str]:
    """
    Collect the ``id`` of every object in a JSON array, keeping order.

    Objects without an ``id`` are skipped. Anything other than a list yields [].
    """
    if not isinstance(payload, list):
        return []
    return [item['id'] for item in payload if isinstance(item, dict) and item.get('id')]
