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
"""Tests for StructlogAdapter, the default LoggingPort implementation."""

import logging

from testnest.core.config import Config
from testnest.logging.port import LoggingPort
from testnest.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_from_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config.defaults())
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert adapter._module_levels == {}

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"testnest": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"testnest": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"testnest": {"logging": {"level": {"root": "INFO", "testnest.specifications": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"testnest.specifications": "DEBUG"}
        assert logging.getLogger("testnest.specifications").level == logging.DEBUG


class TestStructlogAdapterLoggers:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("testnest.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("testnest.data", "warning")
        assert logging.getLogger("testnest.data").level == logging.WARNING

    def test_stdlib_records_render_through_structlog(self, capsys):
        adapter = StructlogAdapter()
        adapter.configure(Config({"testnest": {"logging": {"format": "json"}}}))
        logging.getLogger("testnest.data.evaluator").info("specification_evaluated")
        out = capsys.readouterr().out
        assert '"event": "specification_evaluated"' in out
        assert '"logger": "testnest.data.evaluator"' in out
