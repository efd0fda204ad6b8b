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
"""Specifications for establishments and their child records.

Every builder here accepts its own record id as a lookup filter: when it
parses, that record is selected and the other filters are not applied.
"""

from __future__ import annotations

from testnest.data.specification import Specification
from testnest.domain.establishments import (
    Establishment,
    EstablishmentAddress,
    EstablishmentContact,
    EstablishmentMember,
    EstablishmentPhone,
)
from testnest.domain.ids import (
    EmployeeId,
    EstablishmentAddressId,
    EstablishmentContactId,
    EstablishmentId,
    EstablishmentMemberId,
    EstablishmentPhoneId,
)
from testnest.domain.status import EstablishmentStatus
from testnest.specifications.builder import EntityTable, FilterField, MatchKind, build_specification, by_identity

_TYPED_ID = MatchKind.TYPED_ID


def _lookup(name: str, id_type: type) -> FilterField:
    return FilterField(name, "id", _TYPED_ID, id_type, lookup=True)


def _establishment_filter() -> FilterField:
    return FilterField("establishment_id", "establishment_id", _TYPED_ID, EstablishmentId)


def _is_primary() -> FilterField:
    return FilterField("is_primary", "is_primary", MatchKind.EQUALS)


ESTABLISHMENT_TABLE = EntityTable(
    Establishment,
    filters=(
        _lookup("establishment_id", EstablishmentId),
        FilterField("establishment_status_id", "establishment_status", MatchKind.STATUS, EstablishmentStatus),
        FilterField("establishment_name", "establishment_name"),
        FilterField("establishment_email", "establishment_email"),
    ),
    sort_fields={
        "establishmentname": "establishment_name",
        "establishmentemail": "establishment_email",
        "establishmentstatusid": "establishment_status",
        "establishmentid": "id",
        "id": "id",
    },
)

ESTABLISHMENT_ADDRESS_TABLE = EntityTable(
    EstablishmentAddress,
    filters=(
        _lookup("establishment_address_id", EstablishmentAddressId),
        _establishment_filter(),
        FilterField("city", "city"),
        FilterField("municipality", "municipality"),
        FilterField("province", "province"),
        FilterField("region", "region"),
        _is_primary(),
    ),
    sort_fields={
        "addressline": "address_line",
        "municipality": "municipality",
        "city": "city",
        "province": "province",
        "region": "region",
        "isprimary": "is_primary",
        "establishmentid": "establishment_id",
        "establishmentaddressid": "id",
        "id": "id",
    },
)

ESTABLISHMENT_CONTACT_TABLE = EntityTable(
    EstablishmentContact,
    filters=(
        _lookup("establishment_contact_id", EstablishmentContactId),
        _establishment_filter(),
        FilterField("contact_person_first_name", "contact_person_first_name"),
        FilterField("contact_person_middle_name", "contact_person_middle_name"),
        FilterField("contact_person_last_name", "contact_person_last_name"),
        FilterField("contact_phone_number", "contact_phone_number", MatchKind.CONTAINS),
        _is_primary(),
    ),
    sort_fields={
        "contactpersonfirstname": "contact_person_first_name",
        "contactpersonmiddlename": "contact_person_middle_name",
        "contactpersonlastname": "contact_person_last_name",
        "contactphone": "contact_phone_number",
        "contactphonenumber": "contact_phone_number",
        "isprimary": "is_primary",
        "establishmentid": "establishment_id",
        "establishmentcontactid": "id",
        "id": "id",
    },
)

ESTABLISHMENT_MEMBER_TABLE = EntityTable(
    EstablishmentMember,
    filters=(
        _lookup("establishment_member_id", EstablishmentMemberId),
        _establishment_filter(),
        FilterField("employee_id", "employee_id", _TYPED_ID, EmployeeId),
        FilterField("member_title", "member_title", MatchKind.CONTAINS),
        FilterField("member_description", "member_description", MatchKind.CONTAINS),
        FilterField("member_tag", "member_tag", MatchKind.CONTAINS),
    ),
    sort_fields={
        "membertitle": "member_title",
        "memberdescription": "member_description",
        "membertag": "member_tag",
        "employeeid": "employee_id",
        "establishmentid": "establishment_id",
        "establishmentmemberid": "id",
        "id": "id",
    },
)

ESTABLISHMENT_PHONE_TABLE = EntityTable(
    EstablishmentPhone,
    filters=(
        _lookup("establishment_phone_id", EstablishmentPhoneId),
        _establishment_filter(),
        FilterField("phone_number", "phone_number", MatchKind.CONTAINS),
        _is_primary(),
    ),
    sort_fields={
        "phonenumber": "phone_number",
        "isprimary": "is_primary",
        "establishmentid": "establishment_id",
        "establishmentphoneid": "id",
        "id": "id",
    },
)


def establishment_specification(
    *,
    establishment_id: str | EstablishmentId | None = None,
    establishment_status_id: int | None = None,
    establishment_name: str | None = None,
    establishment_email: str | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[Establishment]:
    return build_specification(
        ESTABLISHMENT_TABLE,
        {
            "establishment_id": establishment_id,
            "establishment_status_id": establishment_status_id,
            "establishment_name": establishment_name,
            "establishment_email": establishment_email,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def establishment_by_id(establishment_id: EstablishmentId) -> Specification[Establishment]:
    return by_identity(ESTABLISHMENT_TABLE, establishment_id)


def establishment_address_specification(
    *,
    establishment_address_id: str | EstablishmentAddressId | None = None,
    establishment_id: str | EstablishmentId | None = None,
    city: str | None = None,
    municipality: str | None = None,
    province: str | None = None,
    region: str | None = None,
    is_primary: bool | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[EstablishmentAddress]:
    return build_specification(
        ESTABLISHMENT_ADDRESS_TABLE,
        {
            "establishment_address_id": establishment_address_id,
            "establishment_id": establishment_id,
            "city": city,
            "municipality": municipality,
            "province": province,
            "region": region,
            "is_primary": is_primary,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def establishment_address_by_id(address_id: EstablishmentAddressId) -> Specification[EstablishmentAddress]:
    return by_identity(ESTABLISHMENT_ADDRESS_TABLE, address_id)


def establishment_contact_specification(
    *,
    establishment_contact_id: str | EstablishmentContactId | None = None,
    establishment_id: str | EstablishmentId | None = None,
    contact_person_first_name: str | None = None,
    contact_person_middle_name: str | None = None,
    contact_person_last_name: str | None = None,
    contact_phone_number: str | None = None,
    is_primary: bool | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[EstablishmentContact]:
    """Contacts by person name (case-insensitive) and phone number (case-sensitive)."""
    return build_specification(
        ESTABLISHMENT_CONTACT_TABLE,
        {
            "establishment_contact_id": establishment_contact_id,
            "establishment_id": establishment_id,
            "contact_person_first_name": contact_person_first_name,
            "contact_person_middle_name": contact_person_middle_name,
            "contact_person_last_name": contact_person_last_name,
            "contact_phone_number": contact_phone_number,
            "is_primary": is_primary,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def establishment_contact_by_id(contact_id: EstablishmentContactId) -> Specification[EstablishmentContact]:
    return by_identity(ESTABLISHMENT_CONTACT_TABLE, contact_id)


def establishment_member_specification(
    *,
    establishment_member_id: str | EstablishmentMemberId | None = None,
    establishment_id: str | EstablishmentId | None = None,
    employee_id: str | EmployeeId | None = None,
    member_title: str | None = None,
    member_description: str | None = None,
    member_tag: str | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[EstablishmentMember]:
    """Members by establishment, employee, and case-sensitive title/description/tag."""
    return build_specification(
        ESTABLISHMENT_MEMBER_TABLE,
        {
            "establishment_member_id": establishment_member_id,
            "establishment_id": establishment_id,
            "employee_id": employee_id,
            "member_title": member_title,
            "member_description": member_description,
            "member_tag": member_tag,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def establishment_member_by_id(member_id: EstablishmentMemberId) -> Specification[EstablishmentMember]:
    return by_identity(ESTABLISHMENT_MEMBER_TABLE, member_id)


def establishment_phone_specification(
    *,
    establishment_phone_id: str | EstablishmentPhoneId | None = None,
    establishment_id: str | EstablishmentId | None = None,
    phone_number: str | None = None,
    is_primary: bool | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[EstablishmentPhone]:
    return build_specification(
        ESTABLISHMENT_PHONE_TABLE,
        {
            "establishment_phone_id": establishment_phone_id,
            "establishment_id": establishment_id,
            "phone_number": phone_number,
            "is_primary": is_primary,
        },
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def establishment_phone_by_id(phone_id: EstablishmentPhoneId) -> Specification[EstablishmentPhone]:
    return by_identity(ESTABLISHMENT_PHONE_TABLE, phone_id)
