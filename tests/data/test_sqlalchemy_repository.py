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
"""Tests for the SQLAlchemy predicate compiler, adapter and repository."""

import uuid

import pytest
from sqlalchemy import select

from testnest.config.properties.data import DataProperties
from testnest.data.memory import InMemoryRepository
from testnest.data.pageable import Order, Pageable
from testnest.data.predicate import Predicate
from testnest.data.relational.sqlalchemy import (
    EngineLifecycle,
    PredicateCompiler,
    Repository,
    SqlAlchemyQueryAdapter,
)
from testnest.data.specification import Specification
from testnest.domain import (
    Employee,
    EmployeeId,
    EmployeeRole,
    EmployeeRoleId,
    EmployeeStatus,
    Establishment,
    EstablishmentId,
    EstablishmentPhone,
    EstablishmentPhoneId,
    EstablishmentStatus,
)
from testnest.kernel.exceptions import InvalidRequestException


class EmployeeRepository(Repository[Employee, EmployeeId]):
    pass


def people(make_employee) -> list[Employee]:
    return [
        make_employee(1, "Alice", "Smith", EmployeeStatus.ACTIVE),
        make_employee(2, "Bob", "Stone", EmployeeStatus.ACTIVE, middle_name="Q"),
        make_employee(3, "alicia", "Keys", EmployeeStatus.SUSPENDED),
        make_employee(4, "Carol", "100%_Sure", EmployeeStatus.INACTIVE),
    ]


def campuses() -> list[Establishment]:
    def campus(n: int, name: str, numbers: list[str]) -> Establishment:
        establishment_id = EstablishmentId(uuid.UUID(int=100 + n))
        phones = [
            EstablishmentPhone(
                id=EstablishmentPhoneId(uuid.UUID(int=10 * n + k)),
                establishment_id=establishment_id,
                phone_number=number,
                is_primary=k == 0,
            )
            for k, number in enumerate(numbers)
        ]
        return Establishment(
            id=establishment_id,
            establishment_name=name,
            establishment_email=f"campus{n}@example.com",
            establishment_status=EstablishmentStatus.ACTIVE,
            phones=phones,
        )

    return [
        campus(1, "North", ["+63 900", "+63 901"]),
        campus(2, "South", ["+63 910"]),
        campus(3, "East", []),
    ]


@pytest.fixture
async def repo(session, make_employee) -> EmployeeRepository:
    repo = EmployeeRepository(session=session)
    for employee in people(make_employee):
        await repo.save(employee)
    return repo


def sql_of(model, predicate) -> str:
    clause = PredicateCompiler(model).compile(predicate)
    return str(select(model).where(clause))


class TestPredicateCompiler:
    def test_compare(self):
        assert "employees.first_name = " in sql_of(Employee, Predicate.eq("first_name", "Alice"))

    def test_none_compiles_to_is_null(self):
        assert "employees.middle_name IS NULL" in sql_of(Employee, Predicate.eq("middle_name", None))

    def test_boolean_structure(self):
        predicate = Predicate.eq("first_name", "a").or_else(Predicate.eq("last_name", "b")).negate()
        sql = sql_of(Employee, predicate)
        assert "NOT" in sql
        assert " OR " in sql

    def test_icontains_lowercases(self):
        assert "lower(employees.first_name) LIKE" in sql_of(Employee, Predicate.icontains("first_name", "ali"))

    def test_relation_path_uses_exists(self):
        sql = sql_of(Employee, Predicate.icontains("employee_role.role_name", "exam"))
        assert "EXISTS" in sql

    def test_unknown_field(self):
        with pytest.raises(InvalidRequestException) as info:
            PredicateCompiler(Employee).compile(Predicate.eq("salary", 1))
        assert info.value.code == "UNKNOWN_FIELD"

    def test_unknown_nested_field(self):
        with pytest.raises(InvalidRequestException):
            PredicateCompiler(Employee).compile(Predicate.eq("first_name.length", 1))


class TestSqlAlchemyQueryAdapter:
    def test_identity(self):
        assert SqlAlchemyQueryAdapter(Employee).identity == "id"

    def test_order_by_unknown_field(self):
        with pytest.raises(InvalidRequestException):
            SqlAlchemyQueryAdapter(Employee).order_by(select(Employee), [Order.asc("salary")])

    def test_include_requires_relationship(self):
        with pytest.raises(InvalidRequestException) as info:
            SqlAlchemyQueryAdapter(Employee).include(select(Employee), "first_name")
        assert info.value.code == "UNKNOWN_RELATION"


class TestRepository:
    def test_entity_type_from_generic(self):
        assert EmployeeRepository(session=None).model is Employee

    def test_requires_model(self):
        with pytest.raises(TypeError):
            Repository()

    @pytest.mark.asyncio
    async def test_requires_session(self):
        with pytest.raises(RuntimeError):
            await EmployeeRepository().find_all_by_spec(Specification.of(Employee))

    @pytest.mark.asyncio
    async def test_find_by_id_returns_typed_values(self, repo):
        found = await repo.find_by_id(EmployeeId(uuid.UUID(int=3)))
        assert found.first_name == "alicia"
        assert found.employee_status is EmployeeStatus.SUSPENDED
        assert isinstance(found.establishment_id, EstablishmentId)

    @pytest.mark.asyncio
    async def test_find_all_defaults_to_identity_order(self, repo):
        items = await repo.find_all_by_spec(Specification.of(Employee))
        assert [e.id.value.int for e in items] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_filter_and_sort(self, repo):
        spec = Specification.where(Employee, Predicate.icontains("first_name", "ALI")).order_by("first_name", "desc")
        items = await repo.find_all_by_spec(spec)
        assert [e.first_name for e in items] == ["alicia", "Alice"]

    @pytest.mark.asyncio
    async def test_case_sensitive_contains(self, repo):
        spec = Specification.where(Employee, Predicate.contains("first_name", "ali"))
        assert [e.first_name for e in await repo.find_all_by_spec(spec)] == ["alicia"]

    @pytest.mark.asyncio
    async def test_contains_escapes_wildcards(self, repo):
        spec = Specification.where(Employee, Predicate.icontains("last_name", "%_s"))
        assert [e.last_name for e in await repo.find_all_by_spec(spec)] == ["100%_Sure"]

    @pytest.mark.asyncio
    async def test_status_filter(self, repo):
        spec = Specification.where(Employee, Predicate.in_list("employee_status", [EmployeeStatus.ACTIVE]))
        assert await repo.count_by_spec(spec) == 2

    @pytest.mark.asyncio
    async def test_paging_and_count(self, repo):
        spec = Specification.of(Employee).order_by("id").paged(Pageable.of(2, 3))
        page = await repo.find_page_by_spec(spec)
        assert [e.id.value.int for e in page.items] == [4]
        assert (page.total, page.page, page.size) == (4, 2, 3)

    @pytest.mark.asyncio
    async def test_find_one_and_exists(self, repo):
        spec = Specification.where(Employee, Predicate.eq("last_name", "Stone"))
        assert (await repo.find_one_by_spec(spec)).first_name == "Bob"
        assert await repo.exists_by_spec(spec)
        assert not await repo.exists_by_spec(Specification.where(Employee, Predicate.eq("last_name", "Nobody")))

    @pytest.mark.asyncio
    async def test_delete(self, repo):
        employee = await repo.find_by_id(EmployeeId(uuid.UUID(int=2)))
        await repo.delete(employee)
        assert await repo.find_by_id(EmployeeId(uuid.UUID(int=2))) is None

    @pytest.mark.asyncio
    async def test_rejects_other_entity_type(self, repo):
        with pytest.raises(TypeError):
            await repo.count_by_spec(Specification.of(EmployeeRole))

    @pytest.mark.asyncio
    async def test_generated_id(self, session):
        roles = Repository(EmployeeRole, session)
        role = await roles.save(EmployeeRole(role_name="Examiner"))
        assert isinstance(role.id, EmployeeRoleId)


class TestIncludes:
    @pytest.mark.asyncio
    async def test_include_loads_collection(self, session):
        establishment_id = EstablishmentId(uuid.UUID(int=100))
        establishments = Repository(Establishment, session)
        await establishments.save(
            Establishment(
                id=establishment_id,
                establishment_name="North Campus",
                establishment_email="north@example.com",
                establishment_status=EstablishmentStatus.ACTIVE,
            )
        )
        phones = Repository(EstablishmentPhone, session)
        for n, number in enumerate(["+63 900", "+63 901"], start=1):
            await phones.save(
                EstablishmentPhone(
                    id=EstablishmentPhoneId(uuid.UUID(int=n)),
                    establishment_id=establishment_id,
                    phone_number=number,
                )
            )
        session.expunge_all()

        spec = Specification.of(Establishment).include("phones")
        found = await establishments.find_one_by_spec(spec)
        assert sorted(p.phone_number for p in found.phones) == ["+63 900", "+63 901"]


class TestParityWithInMemory:
    @pytest.mark.parametrize(
        "spec",
        [
            Specification.of(Employee),
            Specification.where(Employee, Predicate.icontains("first_name", "li")).order_by("last_name"),
            Specification.where(Employee, Predicate.eq("middle_name", None)).order_by("id", "desc"),
            Specification.where(Employee, Predicate.compare("employee_status", "ge", EmployeeStatus.INACTIVE)),
            ~Specification.where(Employee, Predicate.eq("employee_status", EmployeeStatus.ACTIVE)),
            Specification.of(Employee).order_by("employee_status").order_by("id", "desc").with_paging(1, 2),
        ],
    )
    @pytest.mark.asyncio
    async def test_same_results(self, repo, make_employee, spec):
        memory = InMemoryRepository(Employee, people(make_employee))
        expected = [e.id for e in await memory.find_all_by_spec(spec)]
        actual = [e.id for e in await repo.find_all_by_spec(spec)]
        assert actual == expected
        assert await repo.count_by_spec(spec) == await memory.count_by_spec(spec)

    @pytest.mark.parametrize(
        ("predicate", "expected"),
        [
            (Predicate.icontains("first_name", "émile"), [1]),
            (Predicate.icontains("first_name", "É"), [1]),
            (Predicate.icontains("last_name", "ß"), []),
            (Predicate.icontains("last_name", "strasse"), [2]),
        ],
    )
    @pytest.mark.asyncio
    async def test_non_ascii_case_folding(self, session, make_employee, predicate, expected):
        def staff():
            return [make_employee(1, "Émile", "Zola"), make_employee(2, "Hans", "STRASSE")]

        sql = EmployeeRepository(session=session)
        for employee in staff():
            await sql.save(employee)
        memory = InMemoryRepository(Employee, staff())

        spec = Specification.where(Employee, predicate)
        assert [e.id.value.int for e in await memory.find_all_by_spec(spec)] == expected
        assert [e.id.value.int for e in await sql.find_all_by_spec(spec)] == expected

    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            (Specification.where(Establishment, Predicate.contains("phones.phone_number", "900")), [101]),
            (~Specification.where(Establishment, Predicate.contains("phones.phone_number", "900")), [102, 103]),
            (Specification.where(Establishment, Predicate.eq("phones.is_primary", True)), [101, 102]),
            (
                Specification.where(Establishment, Predicate.in_list("phones.phone_number", ["+63 901", "+63 910"])),
                [101, 102],
            ),
        ],
    )
    @pytest.mark.asyncio
    async def test_collection_paths(self, session, spec, expected):
        sql = Repository(Establishment, session)
        for establishment in campuses():
            await sql.save(establishment)
        memory = InMemoryRepository(Establishment, campuses())

        assert [e.id.value.int for e in await memory.find_all_by_spec(spec)] == expected
        assert [e.id.value.int for e in await sql.find_all_by_spec(spec)] == expected
        assert await sql.count_by_spec(spec) == len(expected)


class TestEngineLifecycle:
    @pytest.mark.asyncio
    async def test_create_drop(self):
        lifecycle = EngineLifecycle.from_properties(DataProperties(ddl_auto="create-drop"))
        await lifecycle.start()
        async with lifecycle.session_factory()() as session:
            assert await Repository(EmployeeRole, session).count_by_spec(Specification.of(EmployeeRole)) == 0
        await lifecycle.stop()

    @pytest.mark.asyncio
    async def test_none_skips_schema(self):
        lifecycle = EngineLifecycle.from_properties(DataProperties(ddl_auto="none"))
        await lifecycle.start()
        async with lifecycle.session_factory()() as session:
            with pytest.raises(Exception, match="no such table"):
                await Repository(EmployeeRole, session).count_by_spec(Specification.of(EmployeeRole))
        await lifecycle.stop()
