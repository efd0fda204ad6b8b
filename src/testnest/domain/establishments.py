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
"""Establishment aggregate: the establishment and its child records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from testnest.data.relational.sqlalchemy.entity import BaseEntity
from testnest.data.relational.sqlalchemy.types import IntEnumType, TypedIdType
from testnest.domain.ids import (
    EmployeeId,
    EstablishmentAddressId,
    EstablishmentContactId,
    EstablishmentId,
    EstablishmentMemberId,
    EstablishmentPhoneId,
)
from testnest.domain.status import EstablishmentStatus

if TYPE_CHECKING:
    from testnest.domain.employees import Employee


def _establishment_fk() -> Mapped[EstablishmentId]:
    return mapped_column(TypedIdType(EstablishmentId), ForeignKey("establishments.id"))


class Establishment(BaseEntity):
    __tablename__ = "establishments"

    id: Mapped[EstablishmentId] = mapped_column(
        TypedIdType(EstablishmentId), primary_key=True, default=EstablishmentId.new
    )
    establishment_name: Mapped[str] = mapped_column(String(200))
    establishment_email: Mapped[str] = mapped_column(String(255))
    establishment_status: Mapped[EstablishmentStatus] = mapped_column(
        "establishment_status_id", IntEnumType(EstablishmentStatus), default=EstablishmentStatus.PENDING
    )

    addresses: Mapped[list[EstablishmentAddress]] = relationship(back_populates="establishment")
    contacts: Mapped[list[EstablishmentContact]] = relationship(back_populates="establishment")
    members: Mapped[list[EstablishmentMember]] = relationship(back_populates="establishment")
    phones: Mapped[list[EstablishmentPhone]] = relationship(back_populates="establishment")


class EstablishmentAddress(BaseEntity):
    __tablename__ = "establishment_addresses"

    id: Mapped[EstablishmentAddressId] = mapped_column(
        TypedIdType(EstablishmentAddressId), primary_key=True, default=EstablishmentAddressId.new
    )
    establishment_id: Mapped[EstablishmentId] = _establishment_fk()
    address_line: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(100))
    municipality: Mapped[str] = mapped_column(String(100))
    province: Mapped[str] = mapped_column(String(100))
    region: Mapped[str] = mapped_column(String(100))
    is_primary: Mapped[bool] = mapped_column(default=False)

    establishment: Mapped[Establishment | None] = relationship(back_populates="addresses")


class EstablishmentContact(BaseEntity):
    __tablename__ = "establishment_contacts"

    id: Mapped[EstablishmentContactId] = mapped_column(
        TypedIdType(EstablishmentContactId), primary_key=True, default=EstablishmentContactId.new
    )
    establishment_id: Mapped[EstablishmentId] = _establishment_fk()
    contact_person_first_name: Mapped[str] = mapped_column(String(100))
    contact_person_middle_name: Mapped[str | None] = mapped_column(String(100), default=None)
    contact_person_last_name: Mapped[str] = mapped_column(String(100))
    contact_phone_number: Mapped[str] = mapped_column(String(30))
    is_primary: Mapped[bool] = mapped_column(default=False)

    establishment: Mapped[Establishment | None] = relationship(back_populates="contacts")


class EstablishmentMember(BaseEntity):
    __tablename__ = "establishment_members"

    id: Mapped[EstablishmentMemberId] = mapped_column(
        TypedIdType(EstablishmentMemberId), primary_key=True, default=EstablishmentMemberId.new
    )
    establishment_id: Mapped[EstablishmentId] = _establishment_fk()
    employee_id: Mapped[EmployeeId] = mapped_column(TypedIdType(EmployeeId), ForeignKey("employees.id"))
    member_title: Mapped[str] = mapped_column(String(100))
    member_description: Mapped[str] = mapped_column(String(500))
    member_tag: Mapped[str] = mapped_column(String(50))

    establishment: Mapped[Establishment | None] = relationship(back_populates="members")
    employee: Mapped[Employee | None] = relationship()


class EstablishmentPhone(BaseEntity):
    __tablename__ = "establishment_phones"

    id: Mapped[EstablishmentPhoneId] = mapped_column(
        TypedIdType(EstablishmentPhoneId), primary_key=True, default=EstablishmentPhoneId.new
    )
    establishment_id: Mapped[EstablishmentId] = _establishment_fk()
    phone_number: Mapped[str] = mapped_column(String(30))
    is_primary: Mapped[bool] = mapped_column(default=False)

    establishment: Mapped[Establishment | None] = relationship(back_populates="phones")
