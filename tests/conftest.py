from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

import main

CREATED = datetime(2024, 5, 1, 9, 30, 0)
UPDATED = datetime(2024, 5, 2, 14, 0, 0)


def employee_row(**overrides):
    row = {
        "id": 1,
        "name": "Alice Johnson",
        "created_at": CREATED,
        "updated_at": CREATED,
        "department_id": 1,
    }
    row.update(overrides)
    return row


@pytest.fixture
def pool():
    return AsyncMock()


@pytest.fixture
def client(pool):
    # No context manager: the lifespan (real pool, bootstrap) is not run.
    main.app.state.pool = pool
    yield TestClient(main.app)
    main.app.state.pool = None
