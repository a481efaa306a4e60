"""
models.py
─────────
Pydantic shapes for reminder request bodies.

Only key presence is checked: title/day/month/year may hold any JSON value,
and fields the client adds (time, notes, ...) are kept untouched.
"""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict


class ReminderIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    title: Any
    day: Any
    month: Any
    year: Any


class ReminderRef(BaseModel):
    id: str
