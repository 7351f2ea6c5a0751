# services/gd-practice/schemas/steps.py
from typing import List

from pydantic import BaseModel


class StepOut(BaseModel):
    gx: float
    gy: float
    next_x: float
    next_y: float


class RevealResponse(BaseModel):
    id: str
    step: StepOut
    gx_str: str
    gy_str: str
    next_x_str: str
    next_y_str: str
    answer: str
    text: List[str]
    html: str
