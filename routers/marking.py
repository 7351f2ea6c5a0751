from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter
from sympy import nan, oo, zoo
from sympy.core.power import Pow
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

import config
from catalog import get_question
from engine import answer_pair, compute_step, fmt
from schemas.marking import MarkRequest, MarkResponse

logger = logging.getLogger(__name__)

# --- Parsing / validation helpers ------------------------------------------------
LEN_LIMIT = 100
_INVALID_CHARS_MSG = (
    "Only numeric expressions using digits, spaces, + - * / ^ . and parentheses are allowed."
)
_NON_FINITE_MSG = "Expression is not finite (e.g., division by zero)."
_TOO_COMPLEX_MSG = "Expression is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^().\s]{1,100}$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 200
_MAX_INT_DIGITS = 200
_MAX_EXPONENT_ABS = 2000
_INT_LIMIT = 10**_MAX_INT_DIGITS


def _answer_text_problem(s: Optional[str]) -> Optional[str]:
    if not isinstance(s, str) or not s.strip():
        return "Answer required."
    if len(s) > LEN_LIMIT:
        return f"Answer too long (> {LEN_LIMIT})."
    if not _ALLOWED_RE.fullmatch(s):
        return _INVALID_CHARS_MSG
    return None


# --- Bounded evaluation -----------------------------------------------------------


def _assert_finite(val: Any) -> None:
    if val.is_finite is False or val.has(oo, -oo, zoo, nan):
        raise ValueError(_NON_FINITE_MSG)


def _assert_small(val: Any) -> Any:
    for part in (getattr(val, "p", None), getattr(val, "q", None)):
        if part is not None and abs(int(part)) >= _INT_LIMIT:
            raise ValueError(_TOO_COMPLEX_MSG)
    return val


def _assert_power_fits(base: Any, exp: Any) -> None:
    # Checked before the power is built; 9^9^9 must never be expanded
    if not exp.is_number:
        return
    e = abs(float(exp))
    if e > _MAX_EXPONENT_ABS:
        raise ValueError(_TOO_COMPLEX_MSG)
    if base.is_number and not base.is_zero:
        b = abs(float(base))
        if b and e * abs(math.log10(b)) > _MAX_INT_DIGITS:
            raise ValueError(_TOO_COMPLEX_MSG)


def _bounded_eval(node: Any) -> Any:
    """Evaluate an unevaluated parse tree bottom-up, keeping every intermediate small."""
    if not node.args:
        return _assert_small(node)
    args = [_bounded_eval(a) for a in node.args]
    if isinstance(node, Pow):
        _assert_power_fits(*args)
    return _assert_small(node.func(*args))


def _eval_numeric(expr: str) -> float:
    tree = parse_expr(expr, transformations=TRANSFORMS, evaluate=False)
    if tree.count_ops() > _MAX_OPS:
        raise ValueError(_TOO_COMPLEX_MSG)
    val = _bounded_eval(tree)
    _assert_finite(val)
    out = float(val.evalf())
    if not math.isfinite(out):
        raise ValueError(_NON_FINITE_MSG)
    return out


def _matches(user_val: float, expected: float) -> bool:
    # Typing the displayed (rounded) value counts as correct
    if fmt(user_val) == fmt(expected):
        return True
    return math.isclose(user_val, expected, rel_tol=0, abs_tol=config.MARK_TOLERANCE)


def _read_coord(name: str, answer: str) -> Tuple[Optional[float], str]:
    """Return (value, "") or (None, feedback)."""
    msg = _answer_text_problem(answer)
    if msg:
        return None, f"{name}: {msg}"
    try:
        return _eval_numeric(answer), ""
    except ValueError as e:
        return None, f"{name}: {e}"
    except Exception:
        return None, f"{name}: {_INVALID_CHARS_MSG}"


router = APIRouter(tags=["marking"])


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest) -> Dict[str, Any]:
    q = get_question(req.id)
    if not q:
        return {"ok": False, "correct": False, "score": 0, "feedback": "unknown question id"}

    step = compute_step(q)
    expected = answer_pair(step)

    x_val, x_err = _read_coord("x₁", req.x)
    y_val, y_err = _read_coord("y₁", req.y)
    if x_val is None or y_val is None:
        return {
            "ok": False,
            "correct": False,
            "score": 0,
            "feedback": "; ".join(m for m in (x_err, y_err) if m),
            "expected": expected,
        }

    x_ok = _matches(x_val, step.next_x)
    y_ok = _matches(y_val, step.next_y)

    feedback = ""
    if not (x_ok and y_ok):
        wrong = [n for n, good in (("x₁", x_ok), ("y₁", y_ok)) if not good]
        feedback = f"Recheck {' and '.join(wrong)}: new = old − α · gradient."

    logger.info("mark %s x=%r y=%r -> %s/%s", q.id, req.x, req.y, x_ok, y_ok)
    return {
        "ok": True,
        "correct": x_ok and y_ok,
        "score": int(x_ok) + int(y_ok),
        "x_correct": x_ok,
        "y_correct": y_ok,
        "feedback": feedback,
        "expected": expected,
    }
