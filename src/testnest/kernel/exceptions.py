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
"""Unified exception hierarchy for TestNest.

All library exceptions inherit from TestNestException, enabling unified
error handling across modules.

Categories:
- BusinessException: Domain rule violations, validation errors
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class TestNestException(Exception):
    """Base exception for all TestNest errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "InvalidGuidFormat").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    __test__ = False

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(TestNestException):
    """Domain rule violations and business logic errors."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidRequestException(BusinessException):
    """Request is syntactically valid but semantically incorrect."""
