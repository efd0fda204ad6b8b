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
"""Strongly typed entity identifiers and the id-parsing collaborator."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TypeVar

from testnest.kernel.types import ErrorCategory, Result

ID = TypeVar("ID", bound="TypedId")

INVALID_GUID_FORMAT = "InvalidGuidFormat"
NULL_ID = "NullId"


@dataclass(frozen=True, order=True)
class TypedId:
    """A UUID scoped to one entity type.

    Ids of different types never compare equal, even over the same UUID.
    """

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"{type(self).__name__} requires a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls: type[ID]) -> ID:
        return cls(uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)


class EmployeeId(TypedId):
    pass


class EmployeeRoleId(TypedId):
    pass


class EstablishmentId(TypedId):
    pass


class EstablishmentAddressId(TypedId):
    pass


class EstablishmentContactId(TypedId):
    pass


class EstablishmentMemberId(TypedId):
    pass


class EstablishmentPhoneId(TypedId):
    pass


class SocialMediaId(TypedId):
    pass


def parse_typed_id(id_type: type[ID], text: str | None) -> Result[ID]:
    """Parse *text* as a UUID and wrap it in *id_type*.

    Never raises: malformed text yields an ``InvalidGuidFormat`` failure and
    the nil UUID yields ``NullId``.
    """
    try:
        parsed = uuid.UUID(str(text).strip())
    except ValueError:
        return Result.failure(INVALID_GUID_FORMAT, f"'{text}' is not a valid GUID for {id_type.__name__}.")
    if parsed.int == 0:
        return Result.failure(NULL_ID, f"{id_type.__name__} cannot be empty.", ErrorCategory.VALIDATION)
    return Result.success(id_type(parsed))
