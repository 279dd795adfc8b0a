"""
Kernel test fixtures.

Shared grid configurations. Every fixture returns a fresh dict so tests
can assert the reducer never mutates its input.
"""

import pytest

from gridstate.kernel.reducer import initialize

PEOPLE = [
    {"id": 1, "name": "Ada", "city": "London", "age": 36},
    {"id": 2, "name": "Grace", "city": "New York", "age": 45},
    {"id": 3, "name": "Linus", "city": "Helsinki", "age": 21},
    {"id": 4, "name": "Barbara", "city": "Boston", "age": None},
]


@pytest.fixture
def people():
    return [dict(row) for row in PEOPLE]


@pytest.fixture
def people_config(people):
    return {
        "data": people,
        "renderProperties": {},
        "pageProperties": {"currentPage": 1, "pageSize": 2},
    }


@pytest.fixture
def people_state(people_config):
    return initialize(people_config)
