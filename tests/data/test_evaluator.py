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
"""Tests for the SpecificationEvaluator pipeline."""

import logging
from dataclasses import dataclass

from testnest.data.evaluator import SpecificationEvaluator
from testnest.data.pageable import Order
from testnest.data.ports.adapter import QueryAdapterPort
from testnest.data.predicate import Predicate
from testnest.data.specification import Specification


@dataclass
class Row:
    id: int
    name: str


class RecordingAdapter:
    """Adapter whose query is the list of stage calls made so far."""

    def __init__(self, identity: str = "id") -> None:
        self.identity = identity

    def filter(self, query, predicate):
        return [*query, ("filter", predicate)]

    def order_by(self, query, orders):
        return [*query, ("order_by", tuple(orders))]

    def include(self, query, relation):
        return [*query, ("include", relation)]

    def page(self, query, skip, take):
        return [*query, ("page", skip, take)]


class TestPipelineOrder:
    def test_adapter_conforms_to_port(self):
        assert isinstance(RecordingAdapter(), QueryAdapterPort)

    def test_full_pipeline_order(self):
        predicate = Predicate.eq("name", "x")
        spec = (
            Specification.where(Row, predicate)
            .order_by("name", "desc")
            .include("children", "parent")
            .with_paging(20, 10)
        )
        query = SpecificationEvaluator(RecordingAdapter()).get_query([], spec)
        assert [stage[0] for stage in query] == ["filter", "order_by", "include", "include", "page"]
        assert query[0] == ("filter", predicate)
        assert query[1] == ("order_by", (Order.desc("name"),))
        assert query[-1] == ("page", 20, 10)

    def test_empty_spec_orders_by_identity(self):
        query = SpecificationEvaluator(RecordingAdapter("key")).get_query([], Specification.of(Row))
        assert query == [("order_by", (Order.asc("key"),))]

    def test_multiple_orders_are_passed_primary_first(self):
        spec = Specification.of(Row).order_by("name").order_by("id", "desc")
        query = SpecificationEvaluator(RecordingAdapter()).get_query([], spec)
        assert query == [("order_by", (Order.asc("name"), Order.desc("id")))]

    def test_count_query_applies_filter_only(self):
        predicate = Predicate.eq("name", "x")
        spec = Specification.where(Row, predicate).order_by("name").include("children").with_paging(0, 5)
        query = SpecificationEvaluator(RecordingAdapter()).get_count_query([], spec)
        assert query == [("filter", predicate)]

    def test_count_query_without_predicate(self):
        assert SpecificationEvaluator(RecordingAdapter()).get_count_query([], Specification.of(Row)) == []

    def test_logs_evaluation(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="testnest.data.evaluator"):
            SpecificationEvaluator(RecordingAdapter()).get_query([], Specification.of(Row))
        assert "specification_evaluated" in caplog.text
