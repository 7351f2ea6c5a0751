from __future__ import annotations

import logging
import random as _rnd
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query

import config
from catalog import QuestionDescriptor, get_question, select_many, select_one
from engine import fmt, render_prompt
from schemas.questions import QuestionOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["questions"])


def _rng() -> Optional[_rnd.Random]:
    if config.PRACTICE_SEED is None:
        return None
    return _rnd.Random(config.PRACTICE_SEED)


def question_card(q: QuestionDescriptor, index: int = 1) -> Dict[str, Any]:
    prompt = render_prompt(q)
    return {
        "index": index,
        "id": q.id,
        "function_label": q.function_label,
        "gradient_label_x": q.gradient_label_x,
        "gradient_label_y": q.gradient_label_y,
        "learning_rate": q.learning_rate,
        "start_x": q.start_x,
        "start_y": q.start_y,
        "learning_rate_str": fmt(q.learning_rate),
        "start_x_str": fmt(q.start_x),
        "start_y_str": fmt(q.start_y),
        "text": prompt.text,
        "html": prompt.html,
    }


@router.get("/questions", response_model=List[QuestionOut])
def list_questions(
    count: Optional[int] = Query(default=None, ge=1, le=config.MAX_QUESTIONS),
):
    k = count if count is not None else config.QUESTIONS_PER_PAGE
    qs = select_many(k, _rng())
    logger.info("practice set: %s", ",".join(q.id for q in qs))
    return [question_card(q, i) for i, q in enumerate(qs, 1)]


@router.get("/questions/random", response_model=QuestionOut)
def random_question():
    return question_card(select_one(_rng()))


@router.get("/questions/{qid}", response_model=QuestionOut)
def get_question_detail(qid: str):
    q = get_question(qid)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")
    return question_card(q)
