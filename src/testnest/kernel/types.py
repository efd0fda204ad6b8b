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
"""Error and result value types.

A :class:`Result` is what validation-style collaborators (id parsing,
status lookup) hand back instead of raising. All types use only the
Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """Classifies an error by its origin or domain."""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class Error:
    """A single machine-readable error with a human-readable message."""

    code: str
    message: str
    category: ErrorCategory = ErrorCategory.VALIDATION


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that may fail without raising.

    Exactly one of value or error is meaningful: successful results
    carry a value, failed ones carry an :class:`Error`.
    """

    value: T | None = None
    error: Error | None = None

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def failure(code: str, message: str, category: ErrorCategory = ErrorCategory.VALIDATION) -> Result[T]:
        return Result(error=Error(code=code, message=message, category=category))

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise :class:`ValidationException` on failure."""
        if self.error is not None:
            from testnest.kernel.exceptions import ValidationException

            raise ValidationException(self.error.message, code=self.error.code)
        return self.value  # type: ignore[return-value]
