"""
Employee operations: one store call each, failures mapped to fixed 500s.

Store errors are logged here and never forwarded to the client.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching employees"
CREATE_ERROR = "Error creating employee"
UPDATE_ERROR = "Error updating employee"
DELETE_ERROR = "Error deleting employee"


def _store_error(message: str, exc: Exception) -> HTTPException:
    logger.error("%s: %s", message, exc, exc_info=exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _to_response(row: dict) -> schemas.EmployeeResponse:
    return schemas.EmployeeResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        department_id=row["department_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def list_employees(pool: asyncpg.Pool) -> list[schemas.EmployeeResponse]:
    try:
        rows = await repository.list_employees(pool)
    except Exception as exc:
        raise _store_error(FETCH_ERROR, exc) from exc
    return [_to_response(row) for row in rows]


async def create_employee(
    pool: asyncpg.Pool,
    payload: schemas.EmployeeWriteRequest,
) -> schemas.EmployeeResponse:
    try:
        row = await repository.create_employee(
            pool,
            name=payload.name,
            department_id=payload.department_id,
        )
    except Exception as exc:
        raise _store_error(CREATE_ERROR, exc) from exc
    return _to_response(row)


async def update_employee(
    pool: asyncpg.Pool,
    employee_id: int,
    payload: schemas.EmployeeWriteRequest,
) -> schemas.EmployeeResponse | None:
    """
    None means no employee matched; the caller answers 200 with an empty body.
    """
    try:
        row = await repository.update_employee(
            pool,
            employee_id,
            name=payload.name,
            department_id=payload.department_id,
        )
    except Exception as exc:
        raise _store_error(UPDATE_ERROR, exc) from exc
    if row is None:
        return None
    return _to_response(row)


async def delete_employee(pool: asyncpg.Pool, employee_id: int) -> None:
    try:
        await repository.delete_employee(pool, employee_id)
    except Exception as exc:
        raise _store_error(DELETE_ERROR, exc) from exc
