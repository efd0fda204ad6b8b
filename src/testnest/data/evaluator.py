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
"""Apply a :class:`Specification` to a store query through an adapter."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from testnest.data.pageable import Order
from testnest.data.ports.adapter import QueryAdapterPort
from testnest.data.specification import Specification

Q = TypeVar("Q")

logger = logging.getLogger(__name__)


class SpecificationEvaluator(Generic[Q]):
    """Turn a specification into a backend query.

    The pipeline order is fixed: filter, then sort, then relation includes,
    then paging. Building the query is pure; executing it belongs to the
    caller (a repository), so store failures surface there unchanged.

    Usage::

        evaluator = SpecificationEvaluator(SqlAlchemyQueryAdapter(Employee))
        stmt = evaluator.get_query(select(Employee), spec)
    """

    def __init__(self, adapter: QueryAdapterPort[Q]) -> None:
        self._adapter = adapter

    @property
    def adapter(self) -> QueryAdapterPort[Q]:
        return self._adapter

    def get_query(self, query: Q, spec: Specification[Any]) -> Q:
        """Apply filter, sort, includes and paging from *spec* to *query*."""
        if spec.predicate is not None:
            query = self._adapter.filter(query, spec.predicate)

        orders = spec.sort.orders or (Order.asc(self._adapter.identity),)
        query = self._adapter.order_by(query, orders)

        for relation in spec.includes:
            query = self._adapter.include(query, relation)

        if spec.paging_enabled:
            query = self._adapter.page(query, spec.skip, spec.take)

        logger.debug(
            "specification_evaluated entity=%s filtered=%s orders=%s includes=%s skip=%s take=%s",
            spec.entity_type.__name__,
            spec.predicate is not None,
            [f"{o.property}:{o.direction}" for o in orders],
            list(spec.includes),
            spec.skip if spec.paging_enabled else None,
            spec.take if spec.paging_enabled else None,
        )
        return query

    def get_count_query(self, query: Q, spec: Specification[Any]) -> Q:
        """Apply only the filter from *spec*; sort, includes and paging are ignored."""
        if spec.predicate is not None:
            query = self._adapter.filter(query, spec.predicate)
        return query
