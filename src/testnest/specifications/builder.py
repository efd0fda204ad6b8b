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
"""Declarative entity tables and the generic specification builder.

Each entity describes its optional filters and sortable fields once, as an
:class:`EntityTable`; :func:`build_specification` turns request-style
arguments into a :class:`~testnest.data.specification.Specification`.

The builder never fails on user input. Empty values are ignored, and ids or
status ids that cannot be resolved are skipped as if they had been omitted.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from testnest.data.pageable import Order
from testnest.data.predicate import Predicate
from testnest.data.specification import Specification
from testnest.domain.ids import TypedId, parse_typed_id
from testnest.kernel.types import Result

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MatchKind(enum.Enum):
    """How a filter argument becomes a predicate."""

    ICONTAINS = "icontains"
    CONTAINS = "contains"
    EQUALS = "equals"
    TYPED_ID = "typed_id"
    STATUS = "status"


@dataclass(frozen=True)
class FilterField:
    """One optional filter argument.

    Attributes:
        name: Argument name as the caller passes it.
        path: Entity field path the predicate reads.
        kind: Matching strategy.
        target: Typed id class for ``TYPED_ID``, status enum for ``STATUS``.
        lookup: When set and the value resolves, this filter alone selects
            the record and every other filter is ignored.
    """

    name: str
    path: str
    kind: MatchKind = MatchKind.ICONTAINS
    target: Any = None
    lookup: bool = False


@dataclass(frozen=True)
class EntityTable(Generic[T]):
    """Filters (in application order) and sortable fields for one entity."""

    entity_type: type[T]
    filters: tuple[FilterField, ...]
    sort_fields: Mapping[str, str] = field(default_factory=dict)
    identity: str = "id"

    def sort_path(self, sort_by: str | None) -> str | None:
        """Resolve a request sort key; case and underscores are ignored."""
        if not sort_by:
            return None
        return self.sort_fields.get(sort_by.replace("_", "").strip().lower())


def _resolve(field_: FilterField, value: Any) -> Result[Any]:
    if field_.kind is MatchKind.TYPED_ID:
        if isinstance(value, field_.target):
            return Result.success(value)
        if isinstance(value, TypedId):
            return Result.failure("IdTypeMismatch", f"{type(value).__name__} is not a {field_.target.__name__}.")
        return parse_typed_id(field_.target, value)
    if field_.kind is MatchKind.STATUS:
        if isinstance(value, field_.target):
            return Result.success(value)
        if isinstance(value, enum.Enum):
            return Result.failure("StatusTypeMismatch", f"{type(value).__name__} is not a {field_.target.__name__}.")
        try:
            status_id = int(value)
        except (TypeError, ValueError):
            return Result.failure("InvalidStatusId", f"'{value}' is not a status id.")
        return field_.target.from_id(status_id)
    return Result.success(value)


def _predicate(field_: FilterField, value: Any) -> Predicate:
    if field_.kind is MatchKind.ICONTAINS:
        return Predicate.icontains(field_.path, str(value))
    if field_.kind is MatchKind.CONTAINS:
        return Predicate.contains(field_.path, str(value))
    return Predicate.eq(field_.path, value)


def _collect(table: EntityTable[T], filters: Mapping[str, Any]) -> list[Predicate]:
    predicates: list[Predicate] = []
    for field_ in table.filters:
        value = filters.get(field_.name)
        if value is None or value == "":
            continue
        resolved = _resolve(field_, value)
        if resolved.error is not None:
            logger.debug(
                "filter_skipped entity=%s filter=%s code=%s",
                table.entity_type.__name__,
                field_.name,
                resolved.error.code,
            )
            continue
        predicate = _predicate(field_, resolved.value)
        if field_.lookup:
            return [predicate]
        predicates.append(predicate)
    return predicates


def _paging(page_number: int | None, page_size: int | None) -> tuple[int, int] | None:
    if page_number is None or page_size is None:
        return None
    if page_number < 1 or page_size < 1:
        logger.debug("paging_skipped page_number=%s page_size=%s", page_number, page_size)
        return None
    return (page_number - 1) * page_size, page_size


def build_specification(
    table: EntityTable[T],
    filters: Mapping[str, Any],
    *,
    sort_by: str | None = None,
    sort_direction: str | None = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[T]:
    """Build a specification from optional filters, a sort key and paging.

    Filters are AND-combined in table order. The result always carries
    exactly one sort key: the matched ``sort_by`` field in
    ``sort_direction``, or the identity field ascending when ``sort_by`` is
    absent or unknown. Paging is applied only when both ``page_number`` and
    ``page_size`` are positive.
    """
    spec = Specification.of(table.entity_type)
    for predicate in _collect(table, filters):
        spec = spec & Specification.where(table.entity_type, predicate)

    path = table.sort_path(sort_by)
    order = Order.asc(table.identity) if path is None else Order.parse(path, sort_direction)
    spec = spec.order_by(order.property, order.direction)

    paging = _paging(page_number, page_size)
    if paging is not None:
        spec = spec.with_paging(*paging)
    return spec


def by_identity(table: EntityTable[T], id: TypedId) -> Specification[T]:
    """Single-record lookup: ``identity == id``, no sort, no paging."""
    return Specification.where(table.entity_type, Predicate.eq(table.identity, id))
