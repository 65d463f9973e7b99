# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared fixtures for the helperkit test suite."""
from collections.abc import Iterator
from typing import Any

import pytest

from helperkit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def animals() -> list[dict[str, Any]]:
    """Records used by the comparison and sorting tests."""
    return [
        {"id": 2, "name": "Zebra"},
        {"id": 3, "name": "Dog"},
        {"id": 4, "name": "Elephant"},
    ]
