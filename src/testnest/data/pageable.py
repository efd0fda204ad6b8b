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
"""Sort keys and paging requests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

Direction = Literal["asc", "desc"]


@dataclass(frozen=True)
class Order:
    """A single sort key: dotted field path + direction."""

    property: str
    direction: Direction = "asc"

    @staticmethod
    def asc(property: str) -> Order:
        return Order(property=property, direction="asc")

    @staticmethod
    def desc(property: str) -> Order:
        return Order(property=property, direction="desc")

    @staticmethod
    def parse(property: str, direction: str | None) -> Order:
        """Build an order from a request-style direction string.

        "desc" in any case means descending; anything else is ascending.
        """
        if direction is not None and direction.strip().lower() == "desc":
            return Order.desc(property)
        return Order.asc(property)

    @property
    def is_ascending(self) -> bool:
        return self.direction == "asc"


@dataclass(frozen=True)
class Sort:
    """Ordered sort keys; the first is primary, the rest are tie-breaks."""

    orders: tuple[Order, ...] = ()

    @staticmethod
    def by(*properties: str) -> Sort:
        """Create ascending sort by properties."""
        return Sort(orders=tuple(Order.asc(p) for p in properties))

    @staticmethod
    def unsorted() -> Sort:
        return Sort()

    def and_then(self, other: Sort | Order) -> Sort:
        """Append *other*'s orders after this sort's orders."""
        if isinstance(other, Order):
            return Sort(orders=(*self.orders, other))
        return Sort(orders=self.orders + other.orders)

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)


@dataclass(frozen=True)
class Pageable:
    """Pagination request: 1-based page number and page size."""

    page: int = 1
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")

    @staticmethod
    def of(page: int, size: int) -> Pageable:
        return Pageable(page=page, size=size)

    @staticmethod
    def of_optional(page: int | None, size: int | None) -> Pageable | None:
        """Paging only applies when both *page* and *size* are supplied."""
        if page is None or size is None:
            return None
        return Pageable(page=page, size=size)

    @property
    def offset(self) -> int:
        """Number of rows to skip: (page - 1) * size."""
        return (self.page - 1) * self.size

    def next(self) -> Pageable:
        return Pageable(page=self.page + 1, size=self.size)

    def previous(self) -> Pageable:
        """Return Pageable for previous page (min page 1)."""
        return Pageable(page=max(1, self.page - 1), size=self.size)
