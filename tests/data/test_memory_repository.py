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
"""Tests for the in-memory query adapter and repository."""

import uuid
from dataclasses import dataclass

import pytest

from testnest.data.memory import InMemoryQuery, InMemoryQueryAdapter, InMemoryRepository
from testnest.data.pageable import Order, Pageable
from testnest.data.ports.outbound import SpecificationRepositoryPort
from testnest.data.predicate import Predicate
from testnest.data.specification import Specification
from testnest.domain import Employee, EmployeeId, EmployeeRole
from testnest.kernel.exceptions import InvalidRequestException


@dataclass
class Row:
    id: int
    name: str | None
    rank: int = 0


@pytest.fixture
def rows() -> list[Row]:
    return [Row(3, "c", 1), Row(1, None, 2), Row(2, "a", 1), Row(4, "b", 2)]


@pytest.fixture
def repo(rows) -> InMemoryRepository[Row, int]:
    return InMemoryRepository(Row, rows)


class TestInMemoryQueryAdapter:
    def test_order_nulls_first_ascending(self, rows):
        query = InMemoryQueryAdapter().order_by(InMemoryQuery.of(rows), [Order.asc("name")])
        assert [r.id for r in query] == [1, 2, 4, 3]

    def test_order_nulls_last_descending(self, rows):
        query = InMemoryQueryAdapter().order_by(InMemoryQuery.of(rows), [Order.desc("name")])
        assert [r.id for r in query] == [3, 4, 2, 1]

    def test_multi_key_order(self, rows):
        orders = [Order.desc("rank"), Order.asc("id")]
        query = InMemoryQueryAdapter().order_by(InMemoryQuery.of(rows), orders)
        assert [r.id for r in query] == [1, 4, 2, 3]

    def test_unknown_sort_field(self, rows):
        with pytest.raises(InvalidRequestException) as info:
            InMemoryQueryAdapter().order_by(InMemoryQuery.of(rows), [Order.asc("salary")])
        assert info.value.code == "UNKNOWN_FIELD"

    def test_unknown_filter_field(self, rows):
        with pytest.raises(InvalidRequestException):
            InMemoryQueryAdapter().filter(InMemoryQuery.of(rows), Predicate.eq("salary", 1))

    def test_page_slices(self, rows):
        query = InMemoryQueryAdapter().page(InMemoryQuery.of(rows), 1, 2)
        assert [r.id for r in query] == [1, 2]

    def test_include_records_relation(self):
        role = EmployeeRole(role_name="Examiner")
        query = InMemoryQueryAdapter().include(InMemoryQuery.of([role]), "created_by")
        assert query.includes == ("created_by",)

    def test_include_unknown_relation(self, rows):
        with pytest.raises(InvalidRequestException):
            InMemoryQueryAdapter().include(InMemoryQuery.of(rows), "children")


class TestInMemoryRepository:
    def test_conforms_to_port(self, repo):
        assert isinstance(repo, SpecificationRepositoryPort)

    @pytest.mark.asyncio
    async def test_find_all_defaults_to_identity_order(self, repo):
        items = await repo.find_all_by_spec(Specification.of(Row))
        assert [r.id for r in items] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_find_all_filters(self, repo):
        spec = Specification.where(Row, Predicate.eq("rank", 2))
        assert [r.id for r in await repo.find_all_by_spec(spec)] == [1, 4]

    @pytest.mark.asyncio
    async def test_find_one(self, repo):
        spec = Specification.where(Row, Predicate.eq("rank", 1)).order_by("id", "desc")
        assert (await repo.find_one_by_spec(spec)).id == 3
        missing = Specification.where(Row, Predicate.eq("rank", 9))
        assert await repo.find_one_by_spec(missing) is None

    @pytest.mark.asyncio
    async def test_count_and_exists(self, repo):
        spec = Specification.where(Row, Predicate.eq("rank", 1))
        assert await repo.count_by_spec(spec) == 2
        assert await repo.exists_by_spec(spec)
        assert not await repo.exists_by_spec(Specification.where(Row, Predicate.eq("rank", 5)))

    @pytest.mark.asyncio
    async def test_save_find_and_delete(self, repo):
        row = await repo.save(Row(9, "z"))
        assert await repo.find_by_id(9) is row
        await repo.delete(row)
        assert await repo.find_by_id(9) is None

    @pytest.mark.asyncio
    async def test_save_replaces_same_identity(self, repo):
        await repo.save(Row(1, "renamed"))
        assert (await repo.find_by_id(1)).name == "renamed"
        assert await repo.count_by_spec(Specification.of(Row)) == 4

    @pytest.mark.asyncio
    async def test_rejects_other_entity_type(self, repo):
        with pytest.raises(TypeError):
            await repo.find_all_by_spec(Specification.of(Employee))


class TestPaging:
    @pytest.fixture
    def employees(self, make_employee) -> list[Employee]:
        # 25 employees inserted in reverse identity order.
        return [make_employee(n) for n in range(25, 0, -1)]

    @pytest.mark.asyncio
    async def test_second_page_returns_ranks_11_to_20(self, employees):
        repo = InMemoryRepository(Employee, employees)
        spec = Specification.of(Employee).order_by("id").paged(Pageable.of(2, 10))
        items = await repo.find_all_by_spec(spec)
        assert [e.id for e in items] == [EmployeeId(uuid.UUID(int=n)) for n in range(11, 21)]

    @pytest.mark.asyncio
    async def test_count_ignores_paging(self, employees):
        repo = InMemoryRepository(Employee, employees)
        spec = Specification.of(Employee).paged(Pageable.of(2, 10))
        assert await repo.count_by_spec(spec) == 25

    @pytest.mark.asyncio
    async def test_find_page(self, employees):
        repo = InMemoryRepository(Employee, employees)
        page = await repo.find_page_by_spec(Specification.of(Employee).paged(Pageable.of(3, 10)))
        assert len(page.items) == 5
        assert (page.page, page.size, page.total, page.total_pages) == (3, 10, 25, 3)
        assert not page.has_next

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, employees):
        repo = InMemoryRepository(Employee, employees)
        page = await repo.find_page_by_spec(Specification.of(Employee).paged(Pageable.of(4, 10)))
        assert page.items == []
        assert page.total == 25
