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
"""Pagination result type: one page of items plus the total match count."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from testnest.data.specification import Specification

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A page of results from a paginated query.

    Attributes:
        items: The items on this page.
        total: Number of items matching the filter, ignoring paging.
        page: Current page number (1-based).
        size: Maximum items per page. For unpaged results this is the
            number of items returned.
    """

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.total == 0 or self.size == 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Transform items, preserving pagination metadata (e.g. entity -> DTO)."""
        return Page(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @staticmethod
    def for_spec(spec: Specification[Any], items: list[T], total: int) -> Page[T]:
        """Wrap evaluated *items* using the paging carried by *spec*."""
        if spec.paging_enabled:
            return Page(items=items, total=total, page=spec.skip // spec.take + 1, size=spec.take)
        return Page(items=items, total=total, page=1, size=len(items))
