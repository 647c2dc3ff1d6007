"""
Department API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db, errors

from . import schemas, service

router = APIRouter(prefix="/api/departments")


@router.get("")
@errors.error_message(service.FETCH_ERROR)
async def list_departments(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.DepartmentResponse]:
    return await service.list_departments(pool)
