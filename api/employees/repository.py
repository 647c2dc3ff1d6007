"""
Employee persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_employees(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(pool, "SELECT * FROM employees")


async def create_employee(
    pool: asyncpg.Pool,
    *,
    name: str | None,
    department_id: int | None,
) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO employees (name, department_id, created_at, updated_at)
        VALUES ($1, $2, NOW(), NOW())
        RETURNING *
        """,
        name,
        department_id,
    )
    if row is None:
        raise RuntimeError("Failed to create employee.")
    return row


async def update_employee(
    pool: asyncpg.Pool,
    employee_id: int,
    *,
    name: str | None,
    department_id: int | None,
) -> dict | None:
    """
    Returns None when no employee has `employee_id`.
    """
    return await db.fetch_one(
        pool,
        """
        UPDATE employees
        SET name = $1,
            department_id = $2,
            updated_at = NOW()
        WHERE id = $3
        RETURNING *
        """,
        name,
        department_id,
        employee_id,
    )


async def delete_employee(pool: asyncpg.Pool, employee_id: int) -> None:
    await db.execute(pool, "DELETE FROM employees WHERE id = $1", employee_id)
