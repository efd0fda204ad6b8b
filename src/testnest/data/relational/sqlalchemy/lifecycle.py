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
"""Engine lifecycle and session factory for the relational store."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from testnest.config.properties.data import DataProperties
from testnest.data.relational.sqlalchemy.entity import Base

_logger = logging.getLogger(__name__)


def _unicode_lower(value: Any) -> Any:
    return None if value is None else str(value).lower()


def _configure_sqlite(dbapi_connection: Any, _record: Any) -> None:
    # SQLite LIKE ignores ASCII case unless told otherwise, and its built-in
    # lower() only folds ASCII letters.
    dbapi_connection.create_function("lower", 1, _unicode_lower)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def create_engine(properties: DataProperties) -> AsyncEngine:
    """Create the async engine described by *properties*."""
    engine = create_async_engine(properties.url, echo=properties.echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _configure_sqlite)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class EngineLifecycle:
    """Start/stop wrapper for the async engine.

    On ``start()``, applies the ``ddl-auto`` schema strategy:

    * ``create``: create tables that don't exist
    * ``create-drop``: create on start, drop on shutdown
    * ``none``: skip DDL (for externally migrated databases)
    """

    def __init__(self, engine: AsyncEngine, *, ddl_auto: str = "create") -> None:
        self._engine = engine
        self._ddl_auto = ddl_auto

    @classmethod
    def from_properties(cls, properties: DataProperties) -> EngineLifecycle:
        return cls(create_engine(properties), ddl_auto=properties.ddl_auto)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(self._engine)

    async def start(self) -> None:
        if self._ddl_auto in ("create", "create-drop"):
            _logger.info("Initializing database schema (ddl-auto=%s)", self._ddl_auto)
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            _logger.info("Database schema initialized (%d tables)", len(Base.metadata.tables))

    async def stop(self) -> None:
        if self._ddl_auto == "create-drop":
            _logger.info("Dropping database schema (ddl-auto=create-drop)")
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
        await self._engine.dispose()
