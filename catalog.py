# services/gd-practice/catalog.py

from __future__ import annotations

import logging
import math
import random as _random
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

Gradient = Tuple[float, float]


class QuestionDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    function_label: str
    gradient_label_x: str
    gradient_label_y: str
    gradient_fn: Callable[[float, float], Gradient]
    learning_rate: float = Field(gt=0)
    start_x: float
    start_y: float


# Fixed practice set. Labels use the same minus sign (U+2212) the page shows.
QUESTIONS: Tuple[QuestionDescriptor, ...] = (
    QuestionDescriptor(
        id="gd1",
        function_label="f(x, y) = x^2 + y^2",
        gradient_label_x="2x",
        gradient_label_y="2y",
        gradient_fn=lambda x, y: (2 * x, 2 * y),
        learning_rate=0.1,
        start_x=3,
        start_y=-4,
    ),
    QuestionDescriptor(
        id="gd2",
        function_label="f(x, y) = (x - 1)^2 + (y + 2)^2",
        gradient_label_x="2(x − 1)",
        gradient_label_y="2(y + 2)",
        gradient_fn=lambda x, y: (2 * (x - 1), 2 * (y + 2)),
        learning_rate=0.2,
        start_x=-1,
        start_y=3,
    ),
    QuestionDescriptor(
        id="gd3",
        function_label="f(x, y) = x^2 + 3y^2",
        gradient_label_x="2x",
        gradient_label_y="6y",
        gradient_fn=lambda x, y: (2 * x, 6 * y),
        learning_rate=0.05,
        start_x=2,
        start_y=1,
    ),
    QuestionDescriptor(
        id="gd4",
        function_label="f(x, y) = 0.5x^2 + 2y^2",
        gradient_label_x="x",
        gradient_label_y="4y",
        gradient_fn=lambda x, y: (x, 4 * y),
        learning_rate=0.15,
        start_x=-2,
        start_y=-2,
    ),
    # saddle
    QuestionDescriptor(
        id="gd5",
        function_label="f(x, y) = x^2 − y^2",
        gradient_label_x="2x",
        gradient_label_y="−2y",
        gradient_fn=lambda x, y: (2 * x, -2 * y),
        learning_rate=0.1,
        start_x=1.5,
        start_y=-1,
    ),
    # rotated bowl (cross term)
    QuestionDescriptor(
        id="gd6",
        function_label="f(x, y) = x^2 + xy + y^2",
        gradient_label_x="2x + y",
        gradient_label_y="x + 2y",
        gradient_fn=lambda x, y: (2 * x + y, x + 2 * y),
        learning_rate=0.1,
        start_x=-2,
        start_y=1,
    ),
    # quadratic stand-in for a narrow valley around (1, 1)
    QuestionDescriptor(
        id="gd7",
        function_label="f(x, y) = (x − 1)^2 + 10(y − 1)^2",
        gradient_label_x="2(x − 1)",
        gradient_label_y="20(y − 1)",
        gradient_fn=lambda x, y: (2 * (x - 1), 20 * (y - 1)),
        learning_rate=0.04,
        start_x=0,
        start_y=2,
    ),
    # non-convex
    QuestionDescriptor(
        id="gd8",
        function_label="f(x, y) = sin(x) + cos(y)",
        gradient_label_x="cos(x)",
        gradient_label_y="−sin(y)",
        gradient_fn=lambda x, y: (math.cos(x), -math.sin(y)),
        learning_rate=0.2,
        start_x=1,
        start_y=2,
    ),
    QuestionDescriptor(
        id="gd9",
        function_label="f(x, y) = (1/3)x^3 + y^2",
        gradient_label_x="x^2",
        gradient_label_y="2y",
        gradient_fn=lambda x, y: (x * x, 2 * y),
        learning_rate=0.05,
        start_x=-1,
        start_y=-1.5,
    ),
)


def _shuffled(items, rng) -> List[QuestionDescriptor]:
    out = list(items)
    rng.shuffle(out)
    return out


def select_one(rng: Optional[_random.Random] = None) -> QuestionDescriptor:
    rng = rng or _random
    return rng.choice(QUESTIONS)


def select_many(k: int, rng: Optional[_random.Random] = None) -> List[QuestionDescriptor]:
    """
    Return exactly k descriptors: one shuffled pass over the catalog, topped up
    with further independently shuffled passes when k exceeds its size.
    """
    rng = rng or _random
    if k <= 0:
        return []

    picked = _shuffled(QUESTIONS, rng)
    while len(picked) < k:
        picked.extend(_shuffled(QUESTIONS, rng))

    logger.debug("selected %d of %d questions", k, len(QUESTIONS))
    return picked[:k]


# Public API
def get_question(qid: str) -> Optional[QuestionDescriptor]:
    return next((q for q in QUESTIONS if q.id == qid), None)
