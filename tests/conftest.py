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
"""Shared fixtures: deterministic entity factories and a SQLite session."""

import logging
import uuid
from collections.abc import Callable

import pytest

from testnest.config.properties.data import DataProperties
from testnest.data.relational.sqlalchemy.lifecycle import EngineLifecycle
from testnest.domain import (
    Employee,
    EmployeeId,
    EmployeeRole,
    EmployeeRoleId,
    EmployeeStatus,
    EstablishmentId,
)

ESTABLISHMENT_A = EstablishmentId(uuid.UUID(int=0xA000))
ESTABLISHMENT_B = EstablishmentId(uuid.UUID(int=0xB000))
ROLE_STAFF = EmployeeRoleId(uuid.UUID(int=0xC000))


def uid(n: int) -> uuid.UUID:
    return uuid.UUID(int=n)


@pytest.fixture(autouse=True)
def _restore_logger_levels():
    # Keep logger levels set by one test from leaking into the next.
    manager = logging.Logger.manager
    saved = {name: lg.level for name, lg in manager.loggerDict.items() if isinstance(lg, logging.Logger)}
    root_level = logging.getLogger().level
    yield
    for name, lg in list(manager.loggerDict.items()):
        if isinstance(lg, logging.Logger):
            lg.setLevel(saved.get(name, logging.NOTSET))
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    def factory(
        n: int,
        first_name: str = "Employee",
        last_name: str = "Doe",
        status: EmployeeStatus = EmployeeStatus.ACTIVE,
        establishment_id: EstablishmentId = ESTABLISHMENT_A,
        **kwargs,
    ) -> Employee:
        return Employee(
            id=EmployeeId(uid(n)),
            employee_number=f"EMP-{n:04d}",
            first_name=first_name,
            middle_name=kwargs.pop("middle_name", None),
            last_name=last_name,
            email_address=kwargs.pop("email_address", f"employee{n}@example.com"),
            employee_status=status,
            employee_role_id=ROLE_STAFF,
            establishment_id=establishment_id,
            **kwargs,
        )

    return factory


@pytest.fixture
def roles() -> list[EmployeeRole]:
    # Inserted out of identity order on purpose.
    return [
        EmployeeRole(id=EmployeeRoleId(uid(3)), role_name="Proctor"),
        EmployeeRole(id=EmployeeRoleId(uid(1)), role_name="Administrator"),
        EmployeeRole(id=EmployeeRoleId(uid(2)), role_name="Examiner"),
    ]


@pytest.fixture
async def lifecycle():
    lifecycle = EngineLifecycle.from_properties(DataProperties(url="sqlite+aiosqlite:///:memory:"))
    await lifecycle.start()
    yield lifecycle
    await lifecycle.stop()


@pytest.fixture
async def session(lifecycle):
    async with lifecycle.session_factory()() as session:
        yield session
