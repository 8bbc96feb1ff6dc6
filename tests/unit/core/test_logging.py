"""Unit tests for the Loguru logging setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import orjson
import pytest
from loguru import logger

from recipex.observability.logging import (
    _format_json,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
    unbind_context,
)


if TYPE_CHECKING:
    from collections.abc import Generator


pytestmark = pytest.mark.unit


@pytest.fixture
def json_lines() -> Generator[list[str]]:
    """Capture records rendered by the JSON formatter."""
    lines: list[str] = []
    sink_id = logger.add(
        lambda message: lines.append(str(message)),
        format=_format_json,
        level="DEBUG",
    )
    clear_context()
    yield lines
    logger.remove(sink_id)
    clear_context()


class TestLogContext:
    """Tests for the request-scoped logging context."""

    def test_bind_and_unbind(self) -> None:
        clear_context()
        bind_context(request_id="abc", path="/api/search")
        unbind_context("path")

        assert get_context() == {"request_id": "abc"}
        clear_context()
        assert get_context() == {}

    def test_get_context_returns_copy(self) -> None:
        clear_context()
        get_context()["leak"] = True

        assert get_context() == {}


class TestJsonFormat:
    """Tests for the JSON formatter."""

    def test_record_includes_extra_and_context(self, json_lines: list[str]) -> None:
        bind_context(request_id="req-1")

        get_logger("recipex.test").info("Search stage selected", stage="themealdb")

        payload = orjson.loads(json_lines[-1])
        assert payload["message"] == "Search stage selected"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "recipex.test"
        assert payload["stage"] == "themealdb"
        assert payload["request_id"] == "req-1"

    def test_braces_in_values_survive(self, json_lines: list[str]) -> None:
        get_logger("recipex.test").warning("Odd input", query="{not a template}")

        assert orjson.loads(json_lines[-1])["query"] == "{not a template}"

    def test_exception_is_summarized(self, json_lines: list[str]) -> None:
        try:
            msg = "bad value"
            raise ValueError(msg)
        except ValueError as e:
            get_logger("recipex.test").opt(exception=e).error("Failed")

        payload = orjson.loads(json_lines[-1].splitlines()[0])
        assert payload["exception"] == {"type": "ValueError", "value": "bad value"}


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_intercepts_standard_logging(self) -> None:
        setup_logging(log_level="DEBUG", log_format="json")
        lines: list[str] = []
        sink_id = logger.add(lines.append, format="{message}", level="DEBUG")

        logging.getLogger("recipex.stdlib").warning("from stdlib")

        logger.remove(sink_id)
        assert any("from stdlib" in line for line in lines)

    def test_quiets_noisy_libraries(self) -> None:
        setup_logging(log_level="DEBUG", log_format="text", is_development=True)

        assert logging.getLogger("httpx").level == logging.WARNING
