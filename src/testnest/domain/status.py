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
"""Status enumerations with id lookup."""

from __future__ import annotations

from enum import IntEnum
from typing import Self

from testnest.kernel.types import ErrorCategory, Result

UNKNOWN_STATUS_ID = "UnknownStatusId"


class _LookupStatus(IntEnum):
    """IntEnum whose integer value is the persisted status id."""

    @classmethod
    def from_id(cls, id: int) -> Result[Self]:
        try:
            return Result.success(cls(id))
        except ValueError:
            return Result.failure(
                UNKNOWN_STATUS_ID, f"Unknown {cls.__name__} id: {id}.", ErrorCategory.NOT_FOUND
            )


class EmployeeStatus(_LookupStatus):
    NONE = -1
    ACTIVE = 0
    INACTIVE = 1
    SUSPENDED = 2


class EstablishmentStatus(_LookupStatus):
    NONE = -1
    PENDING = 0
    APPROVAL = 1
    REJECTED = 2
    ACTIVE = 3
    IN_ACTIVE = 4
    SUSPENDED = 5
