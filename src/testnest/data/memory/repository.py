# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Specification-driven repository over an in-process collection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from testnest.data.evaluator import SpecificationEvaluator
from testnest.data.memory.query import InMemoryQuery, InMemoryQueryAdapter
from testnest.data.page import Page
from testnest.data.specification import Specification

T = TypeVar("T")
ID = TypeVar("ID")


class InMemoryRepository(Generic[T, ID]):
    """Repository keeping entities in a dict keyed by their identity field.

    Useful for tests and for services that run without a database. Reads go
    through the same :class:`SpecificationEvaluator` pipeline as the
    relational repository.

    Usage::

        repo = InMemoryRepository(Employee, employees)
        page = await repo.find_page_by_spec(employee_specification(first_name="ali"))
    """

    def __init__(self, model: type[T], items: Iterable[T] = (), identity: str = "id") -> None:
        self._model = model
        self._identity = identity
        self._items: dict[Any, T] = {}
        for item in items:
            self._items[getattr(item, identity)] = item
        self._evaluator: SpecificationEvaluator[InMemoryQuery[T]] = SpecificationEvaluator(
            InMemoryQueryAdapter(identity)
        )

    def _source(self) -> InMemoryQuery[T]:
        return InMemoryQuery.of(self._items.values())

    def _check(self, spec: Specification[Any]) -> None:
        if spec.entity_type is not self._model:
            raise TypeError(
                f"{type(self).__name__}[{self._model.__name__}] cannot evaluate "
                f"Specification[{spec.entity_type.__name__}]"
            )

    async def save(self, entity: T) -> T:
        self._items[getattr(entity, self._identity)] = entity
        return entity

    async def find_by_id(self, id: ID) -> T | None:
        return self._items.get(id)

    async def find_all_by_spec(self, spec: Specification[T]) -> list[T]:
        self._check(spec)
        return self._evaluator.get_query(self._source(), spec).to_list()

    async def find_one_by_spec(self, spec: Specification[T]) -> T | None:
        items = await self.find_all_by_spec(spec)
        return items[0] if items else None

    async def count_by_spec(self, spec: Specification[T]) -> int:
        self._check(spec)
        return len(self._evaluator.get_count_query(self._source(), spec))

    async def exists_by_spec(self, spec: Specification[T]) -> bool:
        return await self.count_by_spec(spec) > 0

    async def find_page_by_spec(self, spec: Specification[T]) -> Page[T]:
        items = await self.find_all_by_spec(spec)
        total = await self.count_by_spec(spec)
        return Page.for_spec(spec, items, total)

    async def delete(self, entity: T) -> None:
        self._items.pop(getattr(entity, self._identity), None)
