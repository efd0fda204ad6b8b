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
"""Outbound ports: specification-driven repository interface."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from testnest.data.page import Page
from testnest.data.specification import Specification

T = TypeVar("T")
ID = TypeVar("ID")


@runtime_checkable
class SpecificationRepositoryPort(Protocol[T, ID]):
    """Repository whose reads are driven by :class:`Specification` values.

    Writes (``save``, ``delete``) stage changes only; committing them is the
    caller's unit of work.
    """

    async def save(self, entity: T) -> T: ...

    async def find_by_id(self, id: ID) -> T | None: ...

    async def find_all_by_spec(self, spec: Specification[T]) -> list[T]: ...

    async def find_one_by_spec(self, spec: Specification[T]) -> T | None: ...

    async def count_by_spec(self, spec: Specification[T]) -> int: ...

    async def exists_by_spec(self, spec: Specification[T]) -> bool: ...

    async def find_page_by_spec(self, spec: Specification[T]) -> Page[T]: ...

    async def delete(self, entity: T) -> None: ...
