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
"""In-memory query adapter: evaluates specifications over Python objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from testnest.data.pageable import Order
from testnest.data.predicate import Predicate, resolve_path
from testnest.kernel.exceptions import InvalidRequestException

T = TypeVar("T")


@dataclass(frozen=True)
class InMemoryQuery(Generic[T]):
    """Immutable snapshot of items flowing through the evaluator stages."""

    items: tuple[T, ...] = ()
    includes: tuple[str, ...] = ()

    @staticmethod
    def of(items: Iterable[T]) -> InMemoryQuery[T]:
        return InMemoryQuery(items=tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_list(self) -> list[T]:
        return list(self.items)


def _read(entity: Any, path: str) -> Any:
    try:
        return resolve_path(entity, path)
    except AttributeError as exc:
        raise InvalidRequestException(
            f"Unknown field '{path}' on {type(entity).__name__}",
            code="UNKNOWN_FIELD",
            context={"entity": type(entity).__name__, "field": path},
        ) from exc


def _sort_key(path: str) -> Callable[[Any], tuple[bool, Any]]:
    # NULLs sort first ascending (and last descending), as in SQLite.
    def key(entity: Any) -> tuple[bool, Any]:
        value = _read(entity, path)
        return (value is not None, value)

    return key


class InMemoryQueryAdapter:
    """:class:`~testnest.data.ports.adapter.QueryAdapterPort` over :class:`InMemoryQuery`."""

    def __init__(self, identity: str = "id") -> None:
        self.identity = identity

    def filter(self, query: InMemoryQuery[T], predicate: Predicate) -> InMemoryQuery[T]:
        try:
            kept = tuple(item for item in query.items if predicate.matches(item))
        except AttributeError as exc:
            raise InvalidRequestException(
                f"Predicate references an unknown field: {exc}", code="UNKNOWN_FIELD"
            ) from exc
        return InMemoryQuery(items=kept, includes=query.includes)

    def order_by(self, query: InMemoryQuery[T], orders: Sequence[Order]) -> InMemoryQuery[T]:
        items = list(query.items)
        # Stable sorts applied from the last key to the first yield a
        # lexicographic order with the first key as primary.
        for order in reversed(orders):
            items.sort(key=_sort_key(order.property), reverse=not order.is_ascending)
        return InMemoryQuery(items=tuple(items), includes=query.includes)

    def include(self, query: InMemoryQuery[T], relation: str) -> InMemoryQuery[T]:
        # Objects already hold their relations; validate the name and record it.
        for item in query.items[:1]:
            _read(item, relation)
        return InMemoryQuery(items=query.items, includes=(*query.includes, relation))

    def page(self, query: InMemoryQuery[T], skip: int, take: int) -> InMemoryQuery[T]:
        return InMemoryQuery(items=query.items[skip : skip + take], includes=query.includes)
