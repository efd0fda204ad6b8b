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
"""Specifications for employees and employee roles."""

from __future__ import annotations

from testnest.data.specification import Specification
from testnest.domain.employees import Employee, EmployeeRole
from testnest.domain.ids import EmployeeId, EmployeeRoleId, EstablishmentId
from testnest.domain.status import EmployeeStatus
from testnest.specifications.builder import EntityTable, FilterField, MatchKind, build_specification, by_identity

EMPLOYEE_TABLE = EntityTable(
    Employee,
    filters=(
        FilterField("employee_number", "employee_number"),
        FilterField("first_name", "first_name"),
        FilterField("middle_name", "middle_name"),
        FilterField("last_name", "last_name"),
        FilterField("email_address", "email_address"),
        FilterField("employee_status_id", "employee_status", MatchKind.STATUS, EmployeeStatus),
        FilterField("employee_role_id", "employee_role_id", MatchKind.TYPED_ID, EmployeeRoleId),
        FilterField("establishment_id", "establishment_id", MatchKind.TYPED_ID, EstablishmentId),
    ),
    sort_fields={
        "employeenumber": "employee_number",
        "firstname": "first_name",
        "middlename": "middle_name",
        "lastname": "last_name",
        "emailaddress": "email_address",
        "employeestatusid": "employee_status",
        "employeeroleid": "employee_role_id",
        "establishmentid": "establishment_id",
        "employeeid": "id",
        "id": "id",
    },
)

EMPLOYEE_ROLE_TABLE = EntityTable(
    EmployeeRole,
    filters=(
        FilterField("employee_role_id", "id", MatchKind.TYPED_ID, EmployeeRoleId),
        FilterField("role_name", "role_name"),
    ),
    sort_fields={"rolename": "role_name", "employeeroleid": "id", "id": "id"},
)


def employee_specification(
    *,
    employee_number: str | None = None,
    first_name: str | None = None,
    middle_name: str | None = None,
    last_name: str | None = None,
    email_address: str | None = None,
    employee_status_id: int | None = None,
    employee_role_id: str | EmployeeRoleId | None = None,
    establishment_id: str | EstablishmentId | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[Employee]:
    """Employees filtered by name, number, email, status, role and establishment.

    Text filters are case-insensitive substrings. Role and establishment ids
    are GUID strings; malformed ids and unknown status ids are ignored.
    """
    return build_specification(
        EMPLOYEE_TABLE,
        {
            "employee_number": employee_number,
            "first_name": first_name,
            "middle_name": middle_name,
            "last_name": last_name,
            "email_address": email_address,
            "employee_status_id": employee_status_id,
            "employee_role_id": employee_role_id,
            "establishment_id": establishment_id,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def employee_by_id(employee_id: EmployeeId) -> Specification[Employee]:
    return by_identity(EMPLOYEE_TABLE, employee_id)


def employee_role_specification(
    *,
    employee_role_id: str | EmployeeRoleId | None = None,
    role_name: str | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[EmployeeRole]:
    return build_specification(
        EMPLOYEE_ROLE_TABLE,
        {"employee_role_id": employee_role_id, "role_name": role_name},
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def employee_role_by_id(employee_role_id: EmployeeRoleId) -> Specification[EmployeeRole]:
    return by_identity(EMPLOYEE_ROLE_TABLE, employee_role_id)
