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
"""SQLAlchemy adapter for specification-driven repositories."""

from testnest.data.relational.sqlalchemy.entity import Base, BaseEntity
from testnest.data.relational.sqlalchemy.lifecycle import EngineLifecycle, create_engine, create_session_factory
from testnest.data.relational.sqlalchemy.query_compiler import PredicateCompiler, SqlAlchemyQueryAdapter
from testnest.data.relational.sqlalchemy.repository import Repository
from testnest.data.relational.sqlalchemy.types import IntEnumType, TypedIdType

__all__ = [
    "Base",
    "BaseEntity",
    "EngineLifecycle",
    "IntEnumType",
    "PredicateCompiler",
    "Repository",
    "SqlAlchemyQueryAdapter",
    "TypedIdType",
    "create_engine",
    "create_session_factory",
]
