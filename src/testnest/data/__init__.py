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
"""TestNest data layer: predicates, specifications, and their evaluation."""

from testnest.data.evaluator import SpecificationEvaluator
from testnest.data.filter import FilterOperator, FilterUtils
from testnest.data.page import Page
from testnest.data.pageable import Order, Pageable, Sort
from testnest.data.ports.adapter import QueryAdapterPort
from testnest.data.ports.outbound import SpecificationRepositoryPort
from testnest.data.predicate import Predicate
from testnest.data.specification import Specification, SpecificationTypeError, combine

__all__ = [
    "FilterOperator",
    "FilterUtils",
    "Order",
    "Page",
    "Pageable",
    "Predicate",
    "QueryAdapterPort",
    "Sort",
    "Specification",
    "SpecificationEvaluator",
    "SpecificationRepositoryPort",
    "SpecificationTypeError",
    "combine",
]
