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
"""TestNest domain: entities, typed ids, and statuses."""

from testnest.domain.employees import Employee, EmployeeRole
from testnest.domain.establishments import (
    Establishment,
    EstablishmentAddress,
    EstablishmentContact,
    EstablishmentMember,
    EstablishmentPhone,
)
from testnest.domain.ids import (
    EmployeeId,
    EmployeeRoleId,
    EstablishmentAddressId,
    EstablishmentContactId,
    EstablishmentId,
    EstablishmentMemberId,
    EstablishmentPhoneId,
    SocialMediaId,
    TypedId,
    parse_typed_id,
)
from testnest.domain.social_media import SocialMediaPlatform
from testnest.domain.status import EmployeeStatus, EstablishmentStatus

__all__ = [
    "Employee",
    "EmployeeId",
    "EmployeeRole",
    "EmployeeRoleId",
    "EmployeeStatus",
    "Establishment",
    "EstablishmentAddress",
    "EstablishmentAddressId",
    "EstablishmentContact",
    "EstablishmentContactId",
    "EstablishmentId",
    "EstablishmentMember",
    "EstablishmentMemberId",
    "EstablishmentPhone",
    "EstablishmentPhoneId",
    "EstablishmentStatus",
    "SocialMediaId",
    "SocialMediaPlatform",
    "TypedId",
    "parse_typed_id",
]
