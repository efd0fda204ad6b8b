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
"""Per-entity specification builders.

Each builder takes optional request-style filters plus ``sort_by``,
``sort_direction``, ``page_number`` and ``page_size``, and always returns a
valid :class:`~testnest.data.specification.Specification`.
"""

from testnest.specifications.builder import EntityTable, FilterField, MatchKind, build_specification, by_identity
from testnest.specifications.employee import (
    employee_by_id,
    employee_role_by_id,
    employee_role_specification,
    employee_specification,
)
from testnest.specifications.establishment import (
    establishment_address_by_id,
    establishment_address_specification,
    establishment_by_id,
    establishment_contact_by_id,
    establishment_contact_specification,
    establishment_member_by_id,
    establishment_member_specification,
    establishment_phone_by_id,
    establishment_phone_specification,
    establishment_specification,
)
from testnest.specifications.social_media import social_media_platform_by_id, social_media_platform_specification

__all__ = [
    "EntityTable",
    "FilterField",
    "MatchKind",
    "build_specification",
    "by_identity",
    "employee_by_id",
    "employee_role_by_id",
    "employee_role_specification",
    "employee_specification",
    "establishment_address_by_id",
    "establishment_address_specification",
    "establishment_by_id",
    "establishment_contact_by_id",
    "establishment_contact_specification",
    "establishment_member_by_id",
    "establishment_member_specification",
    "establishment_phone_by_id",
    "establishment_phone_specification",
    "establishment_specification",
    "social_media_platform_by_id",
    "social_media_platform_specification",
]
