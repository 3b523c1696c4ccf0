"""Shared fixtures: a captured output sink, fast settings, the seeded catalog."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from storefront.catalog import Catalog
from storefront.config import Settings


@pytest.fixture
def lines() -> list[str]:
    return []


@pytest.fixture
def emit(lines: list[str]) -> Callable[[str], None]:
    return lines.append


@pytest.fixture
def settings() -> Settings:
    return Settings(processing_delay=0)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.seeded()


@pytest.fixture
def scripted() -> Callable[..., Callable[[str], str]]:
    """Stand-in for input(): replies in order, then EOF."""

    def make(*answers: str) -> Callable[[str], str]:
        queue = list(answers)

        def read(prompt: str) -> str:
            if not queue:
                raise EOFError
            return queue.pop(0)

        return read

    return make
