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
"""Composable, store-independent query specifications.

A *Specification* describes "which entities, in what order, how many" for a
single entity type: an optional :class:`~testnest.data.predicate.Predicate`,
a :class:`~testnest.data.pageable.Sort`, skip/take paging, and relation
include hints. It is an immutable value; every modifier returns a new one.

Specifications combine with the standard Python operators:

* ``spec_a & spec_b``: both predicates must match (AND).
* ``spec_a | spec_b``: either predicate may match (OR).
* ``~spec_a``: negated predicate (NOT).

The left-hand side always carries the presentation metadata (sort, paging,
includes) of the result; the right-hand side contributes only its predicate.

Example::

    spec = (
        Specification.of(Employee)
        & Specification.where(Employee, Predicate.icontains("first_name", "ali"))
        & Specification.where(Employee, Predicate.eq("employee_status", EmployeeStatus.ACTIVE))
    ).order_by("id").paged(Pageable.of(1, 10))
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from testnest.data.pageable import Direction, Order, Pageable, Sort
from testnest.data.predicate import Predicate

T = TypeVar("T")


class SpecificationTypeError(TypeError):
    """Specifications for different entity types were combined."""


@dataclass(frozen=True)
class Specification(Generic[T]):
    """Immutable description of a filtered, ordered, paginated view over ``T``.

    Attributes:
        entity_type: The entity class this specification targets.
        predicate: Filter condition; ``None`` matches every entity.
        sort: Sort keys, primary first.
        skip: Rows to skip when paging is enabled.
        take: Rows to return when paging is enabled.
        paging_enabled: Whether ``skip``/``take`` apply.
        includes: Relation attribute names to load eagerly.
    """

    entity_type: type[T]
    predicate: Predicate | None = None
    sort: Sort = field(default_factory=Sort)
    skip: int = 0
    take: int = 0
    paging_enabled: bool = False
    includes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.skip < 0:
            raise ValueError(f"skip must be >= 0, got {self.skip}")
        if self.take < 0:
            raise ValueError(f"take must be >= 0, got {self.take}")
        if self.paging_enabled and self.take == 0:
            raise ValueError("take must be > 0 when paging is enabled")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of(entity_type: type[T]) -> Specification[T]:
        """An empty specification: no filter, no sort, no paging."""
        return Specification(entity_type)

    @staticmethod
    def where(entity_type: type[T], predicate: Predicate) -> Specification[T]:
        return Specification(entity_type, predicate=predicate)

    def order_by(self, property: str, direction: Direction = "asc") -> Specification[T]:
        """Append a sort key after any existing ones."""
        return replace(self, sort=self.sort.and_then(Order(property, direction)))

    def with_sort(self, sort: Sort) -> Specification[T]:
        """Replace the sort keys."""
        return replace(self, sort=sort)

    def with_paging(self, skip: int, take: int) -> Specification[T]:
        return replace(self, skip=skip, take=take, paging_enabled=True)

    def paged(self, pageable: Pageable | None) -> Specification[T]:
        """Apply *pageable*; ``None`` leaves the specification unpaged."""
        if pageable is None:
            return self
        return self.with_paging(pageable.offset, pageable.size)

    def include(self, *relations: str) -> Specification[T]:
        return replace(self, includes=self.includes + tuple(r for r in relations if r not in self.includes))

    def is_satisfied_by(self, entity: T) -> bool:
        """Whether *entity* passes the predicate (sort and paging are ignored)."""
        return self.predicate is None or self.predicate.matches(entity)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return combine(self, other)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        """Combine with OR: either predicate may match.

        A side without a predicate contributes nothing, so the result keeps
        the other side's predicate (mirrors SQL ``WHERE`` composition).
        """
        _check_compatible(self, other)
        if self.predicate is None:
            return replace(self, predicate=other.predicate)
        if other.predicate is None:
            return self
        return replace(self, predicate=self.predicate.or_else(other.predicate))

    def __invert__(self) -> Specification[T]:
        """Negate the predicate. Negating "match all" stays "match all"."""
        if self.predicate is None:
            return self
        return replace(self, predicate=self.predicate.negate())


def _check_compatible(left: Any, right: Any) -> None:
    if not isinstance(right, Specification):
        raise SpecificationTypeError(f"Cannot combine Specification with {type(right).__name__}")
    if left.entity_type is not right.entity_type:
        raise SpecificationTypeError(
            f"Cannot combine Specification[{left.entity_type.__name__}] "
            f"with Specification[{right.entity_type.__name__}]"
        )


def combine(left: Specification[T], right: Specification[T]) -> Specification[T]:
    """AND-combine two specifications over the same entity type.

    When both sides have a predicate, *right*'s entity variable is rewritten
    to *left*'s before the two bodies are joined, so the result is a single
    expression over one variable. The result keeps *left*'s sort, paging and
    includes; *right*'s are discarded.

    Raises:
        SpecificationTypeError: If the specifications target different
            entity types.
    """
    _check_compatible(left, right)
    if right.predicate is None:
        predicate = left.predicate
    elif left.predicate is None:
        predicate = right.predicate
    else:
        predicate = left.predicate.and_also(right.predicate)
    return replace(left, predicate=predicate)
