"""
Persistence gateway used by the REST resources.

``ModelRepository`` wraps a Django model.  Resources only depend on the
methods below, so tests may hand them any object exposing the same
surface (see ``core/tests/test_resource.py`` for an in-memory store).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Protocol, Tuple, Type, TypeVar

from django.db import models

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=models.Model)

ASC = 'asc'
DESC = 'desc'


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number, page size and ``(field, direction)`` orders."""

    page: int = 0
    size: int = 20
    sort: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[M]):
    items: List[M]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return int(math.ceil(self.total / float(self.size)))

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0


class Repository(Protocol[M]):
    """Surface the resources rely on.

    ``find_all`` is the unpaged listing; the HTTP list endpoint always goes
    through ``find_page``.
    """

    model: Type[M]

    def save(self, entity: M) -> M: ...

    def find_all(self) -> List[M]: ...

    def find_page(self, page_request: PageRequest) -> Page[M]: ...

    def find_one(self, pk: int) -> Optional[M]: ...

    def delete(self, pk: int) -> None: ...

    def count(self) -> int: ...


def sortable_fields(model: Type[models.Model]) -> List[str]:
    return [f.name for f in model._meta.concrete_fields]


class ModelRepository(Generic[M]):
    """Repository backed by the default manager of a Django model."""

    def __init__(self, model: Type[M]):
        self.model = model

    def _queryset(self):
        return self.model._default_manager.all()

    def save(self, entity: M) -> M:
        # With a primary key set Django updates the row or inserts it
        # under that key when it does not exist yet.
        entity.save()
        return entity

    def find_all(self) -> List[M]:
        return list(self._queryset().order_by('pk'))

    def find_page(self, page_request: PageRequest) -> Page[M]:
        ordering = [('-' if direction == DESC else '') + name for name, direction in page_request.sort]
        if not any(name in ('id', 'pk') for name, _ in page_request.sort):
            ordering.append('pk')
        qs = self._queryset().order_by(*ordering)
        total = qs.count()
        start = page_request.offset
        items = list(qs[start:start + page_request.size])
        return Page(items=items, total=total, page=page_request.page, size=page_request.size)

    def find_one(self, pk: int) -> Optional[M]:
        return self._queryset().filter(pk=pk).first()

    def delete(self, pk: int) -> None:
        deleted, _ = self._queryset().filter(pk=pk).delete()
        if not deleted:
            logger.debug("No %s row with id %s to delete", self.model.__name__, pk)

    def count(self) -> int:
        return self._queryset().count()
