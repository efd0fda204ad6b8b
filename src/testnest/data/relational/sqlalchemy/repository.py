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
"""Specification-driven async repository built on SQLAlchemy 2.0."""

from __future__ import annotations

from typing import Any, Generic, TypeVar, cast, get_args, get_origin

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from testnest.data.evaluator import SpecificationEvaluator
from testnest.data.page import Page
from testnest.data.relational.sqlalchemy.query_compiler import SqlAlchemyQueryAdapter
from testnest.data.specification import Specification

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(Generic[T, ID]):
    """Async repository whose reads are driven by :class:`Specification` values.

    Type Parameters:
        T: The entity type (any SQLAlchemy model).
        ID: The primary key type, usually a typed id.

    Usage::

        class EmployeeRepository(Repository[Employee, EmployeeId]):
            pass

        repo = EmployeeRepository(session=session)
        page = await repo.find_page_by_spec(employee_specification(first_name="ali", page_size=10))
    """

    _entity_type: type | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", []):
            if get_origin(base) is Repository:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    cls._entity_type = args[0]
                break

    def __init__(self, model: type[T] | None = None, session: AsyncSession | None = None, identity: str = "id") -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either Repository[Entity, ID] declaration or explicit model argument"
            )
        self._model: type[T] = cast(type[T], resolved)
        self._session = session
        self._evaluator: SpecificationEvaluator[Any] = SpecificationEvaluator(
            SqlAlchemyQueryAdapter(self._model, identity)
        )

    @property
    def model(self) -> type[T]:
        return self._model

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("No AsyncSession configured for repository")
        return self._session

    def _check(self, spec: Specification[Any]) -> None:
        if spec.entity_type is not self._model:
            raise TypeError(
                f"{type(self).__name__}[{self._model.__name__}] cannot evaluate "
                f"Specification[{spec.entity_type.__name__}]"
            )

    async def save(self, entity: T) -> T:
        """Persist an entity (insert or update) and flush it."""
        session = self._require_session()
        session.add(entity)
        await session.flush()
        await session.refresh(entity)
        return entity

    async def find_by_id(self, id: ID) -> T | None:
        session = self._require_session()
        return await session.get(self._model, id)

    async def find_all_by_spec(self, spec: Specification[T]) -> list[T]:
        """Run the full pipeline: filter, sort, includes, paging."""
        self._check(spec)
        session = self._require_session()
        stmt = self._evaluator.get_query(select(self._model), spec)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def find_one_by_spec(self, spec: Specification[T]) -> T | None:
        items = await self.find_all_by_spec(spec)
        return items[0] if items else None

    async def count_by_spec(self, spec: Specification[T]) -> int:
        """Count entities matching the filter only; sort and paging are ignored."""
        self._check(spec)
        session = self._require_session()
        filtered = self._evaluator.get_count_query(select(self._model), spec)
        result = await session.execute(select(func.count()).select_from(filtered.subquery()))
        return result.scalar_one()

    async def exists_by_spec(self, spec: Specification[T]) -> bool:
        return await self.count_by_spec(spec) > 0

    async def find_page_by_spec(self, spec: Specification[T]) -> Page[T]:
        items = await self.find_all_by_spec(spec)
        total = await self.count_by_spec(spec)
        return Page.for_spec(spec, items, total)

    async def delete(self, entity: T) -> None:
        session = self._require_session()
        await session.delete(entity)
        await session.flush()
