# services/gd-practice/schemas/marking.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class MarkRequest(BaseModel):
    id: str
    x: str
    y: str


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    score: int
    x_correct: bool = False
    y_correct: bool = False
    feedback: str = ""
    expected: Optional[str] = None
