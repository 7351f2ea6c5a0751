# services/gd-practice/schemas/questions.py
from typing import List

from pydantic import BaseModel


class QuestionOut(BaseModel):
    index: int
    id: str
    function_label: str
    gradient_label_x: str
    gradient_label_y: str
    learning_rate: float
    start_x: float
    start_y: float
    # fmt()'d copies for display
    learning_rate_str: str
    start_x_str: str
    start_y_str: str
    text: List[str]
    html: str
