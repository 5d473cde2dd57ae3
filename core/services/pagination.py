"""
Build :class:`PageRequest` objects from list query parameters.

``page`` is zero-based, ``size`` is capped by ``API_MAX_PAGE_SIZE`` and
``sort`` may be repeated, each value reading ``field[,field...][,asc|desc]``.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from django.conf import settings
from rest_framework import serializers

from .repository import ASC, DESC, PageRequest


def default_page_size() -> int:
    return int(getattr(settings, 'API_PAGE_SIZE', 20))


def max_page_size() -> int:
    return int(getattr(settings, 'API_MAX_PAGE_SIZE', 2000))


# row offsets are signed 64-bit integers on every supported backend
MAX_OFFSET = 2 ** 63 - 1


class PageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, min_value=0)
    size = serializers.IntegerField(required=False, min_value=1)

    def validate_size(self, v):
        limit = max_page_size()
        if v > limit:
            raise serializers.ValidationError(f'size must not exceed {limit}')
        return v

    def validate(self, attrs):
        page = attrs.get('page', 0)
        size = attrs.get('size') or default_page_size()
        if page * size > MAX_OFFSET:
            raise serializers.ValidationError({'page': [f'page {page} is out of range for size {size}']})
        return attrs


def parse_sort(values: Iterable[str], allowed: Iterable[str]) -> Tuple[Tuple[str, str], ...]:
    allowed_fields = set(allowed)
    orders: List[Tuple[str, str]] = []
    for value in values:
        parts = [p.strip() for p in (value or '').split(',') if p.strip()]
        if not parts:
            continue
        direction = ASC
        if parts[-1].lower() in (ASC, DESC):
            direction = parts.pop().lower()
        for name in parts:
            if name not in allowed_fields:
                raise serializers.ValidationError({'sort': [f'unknown sort field: {name}']})
            orders.append((name, direction))
    return tuple(orders)


def page_request_from_query(query_params, allowed_sort_fields: Iterable[str]) -> PageRequest:
    q = PageQuerySerializer(data=query_params)
    q.is_valid(raise_exception=True)
    sort_values = query_params.getlist('sort') if hasattr(query_params, 'getlist') else []
    return PageRequest(
        page=q.validated_data.get('page', 0),
        size=q.validated_data.get('size') or default_page_size(),
        sort=parse_sort(sort_values, allowed_sort_fields),
    )
