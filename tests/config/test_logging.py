"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from dialctl.config.logging import configure_logging, dial_context


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dialctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dialctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("dialctl.test")
        log.warning("json test", position=0)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["position"] == 0
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dialctl.test"
        assert "timestamp" in parsed

    def test_stdlib_dial_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("dialctl.services.simulate").debug("Applied R50")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Applied R50"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "dialctl.services.simulate"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("dialctl.services.simulate").debug("Applied R50")
        assert capfd.readouterr().err == ""

    def test_dial_context_binds_and_unbinds(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = logging.getLogger("dialctl.services.simulate")
        with dial_context(op="turn", perimeter=12, start=3):
            log.debug("inside")
        log.debug("outside")
        inside, outside = (json.loads(line) for line in capfd.readouterr().err.splitlines())
        assert (inside["op"], inside["perimeter"], inside["start"]) == ("turn", 12, 3)
        assert "perimeter" not in outside

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
