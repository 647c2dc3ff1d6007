"""
Employee API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db, errors

from . import schemas, service

router = APIRouter(prefix="/api/employees")


@router.get("")
@errors.error_message(service.FETCH_ERROR)
async def list_employees(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.EmployeeResponse]:
    return await service.list_employees(pool)


@router.post("")
@errors.error_message(service.CREATE_ERROR)
async def create_employee(
    request: schemas.EmployeeWriteRequest | None = None,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.EmployeeResponse:
    # No body at all behaves like an empty object.
    return await service.create_employee(pool, request or schemas.EmployeeWriteRequest())


@router.put("/{employee_id}", response_model=None)
@errors.error_message(service.UPDATE_ERROR)
async def update_employee(
    employee_id: int,
    request: schemas.EmployeeWriteRequest | None = None,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.EmployeeResponse | Response:
    updated = await service.update_employee(pool, employee_id, request or schemas.EmployeeWriteRequest())
    if updated is None:
        # Missing id is not an error: 200 with no body.
        return Response(status_code=status.HTTP_200_OK)
    return updated


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
@errors.error_message(service.DELETE_ERROR)
async def delete_employee(
    employee_id: int,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Response:
    await service.delete_employee(pool, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
