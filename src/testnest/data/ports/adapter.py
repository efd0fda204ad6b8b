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
"""Query adapter port: the seam between specifications and a data store.

Each store (in-memory, SQLAlchemy, ...) implements the four evaluator stages
over its own query representation Q. The
:class:`~testnest.data.evaluator.SpecificationEvaluator` decides the order in
which stages run; adapters only translate.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from testnest.data.pageable import Order
from testnest.data.predicate import Predicate

Q = TypeVar("Q")


@runtime_checkable
class QueryAdapterPort(Protocol[Q]):
    """Translate specification stages onto a backend query Q.

    Attributes:
        identity: Field path used as the fallback sort key when a
            specification carries no sort.
    """

    identity: str

    def filter(self, query: Q, predicate: Predicate) -> Q: ...

    def order_by(self, query: Q, orders: Sequence[Order]) -> Q: ...

    def include(self, query: Q, relation: str) -> Q: ...

    def page(self, query: Q, skip: int, take: int) -> Q: ...
