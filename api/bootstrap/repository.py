"""
Schema and seed statements (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db

SEED_DEPARTMENTS = ("Engineering", "Marketing", "Sales", "HR")

# Paired by position with the department ids returned by the seed insert.
SEED_EMPLOYEES = ("Alice Johnson", "Bob Smith", "Carol White", "David Brown")

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS departments (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS departments_name_key ON departments (name);

CREATE TABLE IF NOT EXISTS employees (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    created_at TIMESTAMP DEFAULT NOW(),
    updated_at TIMESTAMP DEFAULT NOW(),
    department_id INTEGER REFERENCES departments(id) ON DELETE SET NULL
);
"""


async def create_schema(pool: asyncpg.Pool) -> None:
    await db.execute(pool, SCHEMA_SQL)


async def insert_seed_departments(pool: asyncpg.Pool) -> list[dict]:
    """
    Insert the seed departments, skipping names that already exist.

    Returns only the newly inserted rows, in VALUES order.
    """
    return await db.fetch_all(
        pool,
        """
        INSERT INTO departments (name)
        VALUES ($1), ($2), ($3), ($4)
        ON CONFLICT DO NOTHING
        RETURNING id
        """,
        *SEED_DEPARTMENTS,
    )


async def insert_seed_employees(pool: asyncpg.Pool, department_ids: list[int]) -> None:
    # Raises IndexError when fewer than four department ids are supplied.
    args: list = []
    for position, name in enumerate(SEED_EMPLOYEES):
        args.extend((name, department_ids[position]))

    await db.execute(
        pool,
        """
        INSERT INTO employees (name, department_id, created_at, updated_at)
        VALUES ($1, $2, NOW(), NOW()),
               ($3, $4, NOW(), NOW()),
               ($5, $6, NOW(), NOW()),
               ($7, $8, NOW(), NOW())
        ON CONFLICT DO NOTHING
        """,
        *args,
    )
