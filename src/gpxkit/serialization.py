"""Helpers turning optional scalars and entities into value-tree members."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .typing import SupportsToDict


def string_or_none(value: Any) -> str | None:
    """Returns `value` as a string, or `None` if it is `None`."""
    return None if value is None else str(value)


def float_or_none(value: Any) -> float | None:
    """Returns `value` as a float, or `None` if it is `None`."""
    return None if value is None else float(value)


def int_or_none(value: Any) -> int | None:
    """Returns `value` as an integer, or `None` if it is `None`."""
    return None if value is None else int(value)


def serialize(
    value: SupportsToDict | Sequence[SupportsToDict] | None,
) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Serialize an optional entity or a sequence of entities.

    Args:
        value: An entity, a sequence of entities, or `None`.

    Returns:
        `None` for `None`, the entity's own value tree for a single entity,
        and a list of value trees (possibly empty) for a sequence.
    """
    if value is None:
        return None
    if isinstance(value, SupportsToDict):
        return value.to_dict()
    return [item.to_dict() for item in value]
