"""
Startup schema creation and one-time seeding.

Steps:
1. create both tables if they do not exist
2. insert the seed departments, collecting the ids that were new
3. only when step 2 inserted something (fresh database), insert the seed
   employees, pairing employee i with returned department id i

Employee seeding keys off the department insert alone; it does not check
whether the employees themselves already exist. Pairing is by position in
the returned rows, not by department name.

Any failure is logged and swallowed so the server keeps running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import asyncpg

from . import repository

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    tables_ready: bool = False
    department_ids: list[int] = field(default_factory=list)
    employees_seeded: bool = False


async def run(pool: asyncpg.Pool) -> SeedResult:
    result = SeedResult()
    try:
        await repository.create_schema(pool)
        result.tables_ready = True
        logger.info("Tables created or confirmed existing")

        rows = await repository.insert_seed_departments(pool)
        result.department_ids = [int(row["id"]) for row in rows]

        if not result.department_ids:
            logger.info("Departments already seeded, skipping employee seed.")
            return result

        logger.info("Departments seeded: %s", result.department_ids)
        await repository.insert_seed_employees(pool, result.department_ids)
        result.employees_seeded = True
        logger.info("Employees seeded successfully")
    except Exception:
        logger.exception("Error initializing database")
    return result
