"""
Department persistence (raw SQL). Departments are read-only over HTTP.
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_departments(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(pool, "SELECT * FROM departments")
