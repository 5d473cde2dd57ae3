"""
Identity of an entity payload: either not yet stored or stored under an id.

Resources branch on these two cases instead of checking ``id`` for
``None`` in every handler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from rest_framework import serializers
from rest_framework.exceptions import ValidationError


@dataclass(frozen=True)
class Unsaved:
    """Payload for an entity the store has not assigned an id to."""


@dataclass(frozen=True)
class Saved:
    id: int


Identity = Union[Unsaved, Saved]

# rejects fractional numbers and booleans instead of truncating them
_id_field = serializers.IntegerField(max_value=2 ** 63 - 1)


def identity_from_payload(data: Mapping[str, Any]) -> Identity:
    raw = data.get('id') if hasattr(data, 'get') else None
    if raw is None or raw == '':
        return Unsaved()
    try:
        return Saved(_id_field.run_validation(raw))
    except ValidationError as e:
        raise ValidationError({'id': e.detail})
