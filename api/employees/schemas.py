"""
Employee API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EmployeeWriteRequest(BaseModel):
    # Numbers are accepted as names, the way the store casts them to text.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Both fields may be omitted; the store enforces NOT NULL on name.
    name: str | None = None
    department_id: int | None = None


class EmployeeResponse(BaseModel):
    id: int
    name: str
    department_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
