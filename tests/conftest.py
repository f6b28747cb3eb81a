"""Shared test fixtures."""

from collections.abc import Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock outgoing aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked
