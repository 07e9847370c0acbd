"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from devconvert.infrastructure.history import InMemoryHistoryStore


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    """Fresh in-memory history store."""
    return InMemoryHistoryStore()


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock advancing one second per call, starting at a fixed instant."""
    start = datetime(2024, 1, 1, tzinfo=UTC)
    ticks: Iterator[int] = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))
