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
"""SQLAlchemy predicate compiler and query adapter.

:class:`PredicateCompiler` walks a :class:`~testnest.data.predicate.Predicate`
tree and produces a SQLAlchemy boolean clause for one mapped entity.
:class:`SqlAlchemyQueryAdapter` implements
:class:`~testnest.data.ports.adapter.QueryAdapterPort` over ``Select``
statements so the :class:`~testnest.data.evaluator.SpecificationEvaluator`
can drive it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, and_, not_, or_
from sqlalchemy.orm import RelationshipProperty, selectinload

from testnest.data.pageable import Order
from testnest.data.predicate import (
    AndAlso,
    Compare,
    Constant,
    Contains,
    Expr,
    In,
    Not,
    OrElse,
    Predicate,
    split_member_path,
)
from testnest.kernel.exceptions import InvalidRequestException

T = TypeVar("T")

_SWAPPED = {"eq": "eq", "ne": "ne", "lt": "gt", "le": "ge", "gt": "lt", "ge": "le"}


def _unknown_field(model: type[Any], path: str) -> InvalidRequestException:
    return InvalidRequestException(
        f"Unknown field '{path}' on {model.__name__}",
        code="UNKNOWN_FIELD",
        context={"entity": model.__name__, "field": path},
    )


def _attribute(model: type[Any], name: str) -> Any:
    attr = getattr(model, name, None)
    if attr is None or not hasattr(attr, "property"):
        raise _unknown_field(model, name)
    return attr


def _column_clause(
    model: type[Any], path: str, build: Callable[[Any], ColumnElement[bool]]
) -> ColumnElement[bool]:
    """Apply *build* to the column at *path*, following relationships for dotted paths."""
    head, _, rest = path.partition(".")
    attr = _attribute(model, head)
    if not rest:
        return build(attr)
    prop = attr.property
    if not isinstance(prop, RelationshipProperty):
        raise _unknown_field(model, path)
    inner = _column_clause(prop.mapper.class_, rest, build)
    return attr.any(inner) if prop.uselist else attr.has(inner)


class PredicateCompiler:
    """Compile predicate expression trees into SQLAlchemy clauses for *model*."""

    def __init__(self, model: type[Any]) -> None:
        self._model = model

    def compile(self, predicate: Predicate) -> ColumnElement[bool]:
        return self._visit(predicate.body)

    def _path(self, node: Expr) -> str:
        split = split_member_path(node)
        if split is None:
            raise InvalidRequestException(
                f"Expected a field reference, got {type(node).__name__}", code="UNSUPPORTED_EXPRESSION"
            )
        return split[1]

    def _visit(self, node: Expr) -> ColumnElement[bool]:
        if isinstance(node, AndAlso):
            return and_(self._visit(node.left), self._visit(node.right))
        if isinstance(node, OrElse):
            return or_(self._visit(node.left), self._visit(node.right))
        if isinstance(node, Not):
            return not_(self._visit(node.operand))
        if isinstance(node, Compare):
            return self._compare(node)
        if isinstance(node, Contains):
            return self._contains(node)
        if isinstance(node, In):
            values = list(node.values)
            return _column_clause(self._model, self._path(node.subject), lambda col: col.in_(values))
        raise InvalidRequestException(
            f"Unsupported expression node: {type(node).__name__}", code="UNSUPPORTED_EXPRESSION"
        )

    def _compare(self, node: Compare) -> ColumnElement[bool]:
        op, member, constant = node.op, node.left, node.right
        if isinstance(member, Constant):
            op, member, constant = _SWAPPED[op], node.right, node.left
        if not isinstance(constant, Constant):
            raise InvalidRequestException(
                "Comparisons between two fields are not supported", code="UNSUPPORTED_EXPRESSION"
            )
        value = constant.value
        builders: dict[str, Callable[[Any], ColumnElement[bool]]] = {
            "eq": lambda col: col.is_(None) if value is None else col == value,
            "ne": lambda col: col.is_not(None) if value is None else col != value,
            "lt": lambda col: col < value,
            "le": lambda col: col <= value,
            "gt": lambda col: col > value,
            "ge": lambda col: col >= value,
        }
        return _column_clause(self._model, self._path(member), builders[op])

    def _contains(self, node: Contains) -> ColumnElement[bool]:
        if not isinstance(node.needle, Constant):
            raise InvalidRequestException("Substring needle must be a constant", code="UNSUPPORTED_EXPRESSION")
        needle = str(node.needle.value)
        if node.ignore_case:
            return _column_clause(
                self._model, self._path(node.subject), lambda col: col.icontains(needle, autoescape=True)
            )
        return _column_clause(self._model, self._path(node.subject), lambda col: col.contains(needle, autoescape=True))


class SqlAlchemyQueryAdapter(Generic[T]):
    """:class:`~testnest.data.ports.adapter.QueryAdapterPort` over ``Select`` statements."""

    def __init__(self, model: type[T], identity: str = "id") -> None:
        self._model = model
        self._compiler = PredicateCompiler(model)
        self.identity = identity

    def filter(self, query: Select[Any], predicate: Predicate) -> Select[Any]:
        return query.where(self._compiler.compile(predicate))

    def order_by(self, query: Select[Any], orders: Sequence[Order]) -> Select[Any]:
        for order in orders:
            col = _attribute(self._model, order.property)
            query = query.order_by(col.asc() if order.is_ascending else col.desc())
        return query

    def include(self, query: Select[Any], relation: str) -> Select[Any]:
        attr = _attribute(self._model, relation)
        if not isinstance(attr.property, RelationshipProperty):
            raise InvalidRequestException(
                f"'{relation}' is not a relationship of {self._model.__name__}",
                code="UNKNOWN_RELATION",
                context={"entity": self._model.__name__, "relation": relation},
            )
        return query.options(selectinload(attr))

    def page(self, query: Select[Any], skip: int, take: int) -> Select[Any]:
        return query.offset(skip).limit(take)
