"""
Department API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class DepartmentResponse(BaseModel):
    id: int
    name: str
