"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created in the FastAPI lifespan (see `api/main.py`), stored on
`app.state.pool`, and handed to handlers through `get_pool`. Every helper
takes the pool explicitly; there is no module-level pool.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

logger = logging.getLogger(__name__)


def _without_sslmode(url: str) -> str:
    # sslmode is dropped; TLS is left to asyncpg's defaults.
    parts = urlsplit(url)
    kept = [pair for pair in parse_qsl(parts.query, keep_blank_values=True) if pair[0] != "sslmode"]
    return urlunsplit(parts._replace(query=urlencode(kept)))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _without_sslmode(url)


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    """
    Build the process-wide pool.

    min_size=0 keeps startup lazy: no connection is opened until the first
    query, so an unreachable store does not stop the server from starting.
    """
    pool = await asyncpg.create_pool(dsn=dsn or database_url(), min_size=0)
    logger.info("Database connection pool created")
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("Database connection pool closed")


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool.fetchrow(sql, *args)
    return None if row is None else dict(row)


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Rows come back as plain dicts so they serialize without asyncpg types.
    """
    return [dict(row) for row in await pool.fetch(sql, *args)]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> None:
    # Without args asyncpg uses the simple protocol, which allows several statements.
    await pool.execute(sql, *args)
