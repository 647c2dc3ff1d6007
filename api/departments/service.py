"""
Department operations.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching departments"


async def list_departments(pool: asyncpg.Pool) -> list[schemas.DepartmentResponse]:
    try:
        rows = await repository.list_departments(pool)
    except Exception as exc:
        logger.error("%s: %s", FETCH_ERROR, exc, exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=FETCH_ERROR,
        ) from exc
    return [schemas.DepartmentResponse(id=int(row["id"]), name=str(row["name"])) for row in rows]
