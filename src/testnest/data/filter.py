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
"""Dynamic specification building from single-field operators.

:class:`FilterOperator` produces one-predicate specifications for an entity
type; :class:`FilterUtils` builds AND-combined specifications from keyword
arguments, dicts, or partial example objects (*Query by Example*).

Example::

    ops = FilterOperator(Employee)
    spec = ops.icontains("first_name", "ali") & ops.eq("employee_status", EmployeeStatus.ACTIVE)

    spec = FilterUtils.from_dict(Employee, {"last_name": "Smith", "middle_name": None})
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from testnest.data.predicate import Predicate
from testnest.data.specification import Specification

T = TypeVar("T")


class FilterOperator(Generic[T]):
    """Single-field specification factories for one entity type.

    Each method returns a :class:`Specification` with exactly one predicate
    and no sort or paging, ready to be combined with ``&``, ``|`` and ``~``.
    """

    def __init__(self, entity_type: type[T]) -> None:
        self._entity_type = entity_type

    def _spec(self, predicate: Predicate) -> Specification[T]:
        return Specification.where(self._entity_type, predicate)

    def eq(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.eq(field, value))

    def neq(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.compare(field, "ne", value))

    def gt(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.compare(field, "gt", value))

    def gte(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.compare(field, "ge", value))

    def lt(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.compare(field, "lt", value))

    def lte(self, field: str, value: Any) -> Specification[T]:
        return self._spec(Predicate.compare(field, "le", value))

    def icontains(self, field: str, value: str) -> Specification[T]:
        """Case-insensitive substring match."""
        return self._spec(Predicate.icontains(field, value))

    def contains(self, field: str, value: str) -> Specification[T]:
        """Case-sensitive substring match."""
        return self._spec(Predicate.contains(field, value))

    def in_list(self, field: str, values: Iterable[Any]) -> Specification[T]:
        return self._spec(Predicate.in_list(field, values))

    def is_null(self, field: str) -> Specification[T]:
        return self.eq(field, None)


class FilterUtils:
    """Generate AND-combined equality specifications (Query by Example)."""

    @staticmethod
    def by(entity_type: type[T], **kwargs: Any) -> Specification[T]:
        """Create a specification from keyword arguments (all eq, ANDed)."""
        ops = FilterOperator(entity_type)
        return FilterUtils._combine_and(entity_type, [ops.eq(f, v) for f, v in kwargs.items()])

    @staticmethod
    def from_dict(entity_type: type[T], filters: dict[str, Any]) -> Specification[T]:
        """Create a specification from field->value pairs. ``None`` values are skipped."""
        ops = FilterOperator(entity_type)
        specs = [ops.eq(f, v) for f, v in filters.items() if v is not None]
        return FilterUtils._combine_and(entity_type, specs)

    @staticmethod
    def from_example(entity_type: type[T], example: Any) -> Specification[T]:
        """Create a specification from the non-``None`` fields of *example*.

        Supports dataclasses and any object with ``__dict__``; private
        attributes (leading underscore) are ignored.
        """
        if dataclasses.is_dataclass(example) and not isinstance(example, type):
            values = {f.name: getattr(example, f.name) for f in dataclasses.fields(example)}
        else:
            values = {k: v for k, v in vars(example).items() if not k.startswith("_")}
        return FilterUtils.from_dict(entity_type, values)

    @staticmethod
    def _combine_and(entity_type: type[T], specs: list[Specification[T]]) -> Specification[T]:
        """AND-combine *specs* onto an empty specification."""
        result = Specification.of(entity_type)
        for s in specs:
            result = result & s
        return result
