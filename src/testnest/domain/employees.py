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
"""Employee and employee role entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from testnest.data.relational.sqlalchemy.entity import BaseEntity
from testnest.data.relational.sqlalchemy.types import IntEnumType, TypedIdType
from testnest.domain.ids import EmployeeId, EmployeeRoleId, EstablishmentId
from testnest.domain.status import EmployeeStatus

if TYPE_CHECKING:
    from testnest.domain.establishments import Establishment


class EmployeeRole(BaseEntity):
    __tablename__ = "employee_roles"

    id: Mapped[EmployeeRoleId] = mapped_column(
        TypedIdType(EmployeeRoleId), primary_key=True, default=EmployeeRoleId.new
    )
    role_name: Mapped[str] = mapped_column(String(100))


class Employee(BaseEntity):
    __tablename__ = "employees"

    id: Mapped[EmployeeId] = mapped_column(TypedIdType(EmployeeId), primary_key=True, default=EmployeeId.new)
    employee_number: Mapped[str] = mapped_column(String(50))
    first_name: Mapped[str] = mapped_column(String(100))
    middle_name: Mapped[str | None] = mapped_column(String(100), default=None)
    last_name: Mapped[str] = mapped_column(String(100))
    email_address: Mapped[str] = mapped_column(String(255))
    employee_status: Mapped[EmployeeStatus] = mapped_column(
        "employee_status_id", IntEnumType(EmployeeStatus), default=EmployeeStatus.NONE
    )
    employee_role_id: Mapped[EmployeeRoleId] = mapped_column(
        TypedIdType(EmployeeRoleId), ForeignKey("employee_roles.id")
    )
    establishment_id: Mapped[EstablishmentId] = mapped_column(
        TypedIdType(EstablishmentId), ForeignKey("establishments.id")
    )

    employee_role: Mapped[EmployeeRole | None] = relationship()
    establishment: Mapped[Establishment | None] = relationship()
