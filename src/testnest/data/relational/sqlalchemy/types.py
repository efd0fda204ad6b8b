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
"""Column types mapping typed ids and status enums onto portable SQL types."""

from __future__ import annotations

import uuid
from enum import IntEnum
from typing import Any

from sqlalchemy import Integer, Uuid
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator


class TypedIdType(TypeDecorator[Any]):
    """Store a typed id (a frozen wrapper with a ``value`` UUID) as a UUID column and load it back typed."""

    impl = Uuid
    cache_ok = True

    def __init__(self, id_type: type[Any]) -> None:
        super().__init__()
        self.id_type = id_type

    def process_bind_param(self, value: Any, dialect: Dialect) -> uuid.UUID | None:
        if value is None:
            return None
        if isinstance(value, self.id_type):
            return value.value
        if isinstance(value, uuid.UUID):
            return value
        raise TypeError(f"Expected {self.id_type.__name__} or UUID, got {type(value).__name__}")

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.id_type(value if isinstance(value, uuid.UUID) else uuid.UUID(str(value)))


class IntEnumType(TypeDecorator[IntEnum]):
    """Store an :class:`IntEnum` by its integer value."""

    impl = Integer
    cache_ok = True

    def __init__(self, enum_type: type[IntEnum]) -> None:
        super().__init__()
        self.enum_type = enum_type

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        return None if value is None else int(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> IntEnum | None:
        return None if value is None else self.enum_type(value)
