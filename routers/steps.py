from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from catalog import get_question
from engine import answer_pair, compute_step, fmt, render_derivation
from schemas.steps import RevealResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["steps"])


@router.post("/questions/{qid}/reveal", response_model=RevealResponse)
def reveal(qid: str):
    q = get_question(qid)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")

    # recomputed on every reveal; nothing is cached
    step = compute_step(q)
    rendered = render_derivation(q, step)
    logger.info("reveal %s -> %s", qid, answer_pair(step))

    return {
        "id": q.id,
        "step": step.model_dump(),
        "gx_str": fmt(step.gx),
        "gy_str": fmt(step.gy),
        "next_x_str": fmt(step.next_x),
        "next_y_str": fmt(step.next_y),
        "answer": answer_pair(step),
        "text": rendered.text,
        "html": rendered.html,
    }
