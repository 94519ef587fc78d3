import datetime

import pytest

from chromacle.storage import MemoryStore


@pytest.fixture
def day():
    return datetime.date(2026, 10, 17)


@pytest.fixture
def store():
    return MemoryStore()
