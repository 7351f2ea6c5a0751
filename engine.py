# services/gd-practice/engine.py
from __future__ import annotations

import math
from html import escape
from typing import List

from pydantic import BaseModel

from catalog import QuestionDescriptor

DECIMALS = 4
_SCALE = 10**DECIMALS


class StepResult(BaseModel):
    gx: float
    gy: float
    next_x: float
    next_y: float


def compute_step(q: QuestionDescriptor) -> StepResult:
    gx, gy = q.gradient_fn(q.start_x, q.start_y)
    return StepResult(
        gx=gx,
        gy=gy,
        next_x=q.start_x - q.learning_rate * gx,
        next_y=q.start_y - q.learning_rate * gy,
    )


def fmt(n: float) -> str:
    """
    Round half-up to 4 decimal places and drop trailing zeros (and a bare ".").
    3 -> "3", 0.1 -> "0.1", 2/3 -> "0.6667".
    """
    v = math.floor(n * _SCALE + 0.5) / _SCALE
    if v == 0:
        v = 0.0  # no "-0"
    s = f"{v:.{DECIMALS}f}"
    return s.rstrip("0").rstrip(".")


# ---------- Display primitives ----------


class ColumnVector(BaseModel):
    top: str
    bottom: str

    def text(self) -> str:
        return f"[{self.top}; {self.bottom}]"

    def html(self) -> str:
        return (
            '<span class="colvec">'
            f'<span class="row">{escape(self.top)}</span>'
            f'<span class="row">{escape(self.bottom)}</span>'
            "</span>"
        )


class Rendered(BaseModel):
    text: List[str]
    html: str


def _strong(s: str) -> str:
    return f"<strong>{escape(s)}</strong>"


def _code(s: str) -> str:
    return f'<span class="code">{escape(s)}</span>'


# ---------- Cards ----------


def render_prompt(q: QuestionDescriptor) -> Rendered:
    grad = ColumnVector(top=q.gradient_label_x, bottom=q.gradient_label_y)
    start = ColumnVector(top=fmt(q.start_x), bottom=fmt(q.start_y))
    alpha = f"α = {fmt(q.learning_rate)}"

    text = [
        q.function_label,
        f"∇f(x, y) = {grad.text()}",
        f"Learning rate: {alpha}",
        f"Starting point: {start.text()}",
    ]
    html = "".join(
        [
            f'<div class="formula">{escape(q.function_label)}</div>',
            f'<div class="formula">∇f(x, y) = {grad.html()}</div>',
            '<div class="params">',
            f"<p>Learning rate: {_code(alpha)}</p>",
            f"<p>Starting point: {start.html()}</p>",
            "</div>",
        ]
    )
    return Rendered(text=text, html=html)


def render_derivation(q: QuestionDescriptor, step: StepResult) -> Rendered:
    """
    Worked update, in reading order: gradient at the start point, the vector
    equation, one scalar line per coordinate, then the final pair.
    """
    x0, y0, a = fmt(q.start_x), fmt(q.start_y), fmt(q.learning_rate)
    gx, gy = fmt(step.gx), fmt(step.gy)
    x1, y1 = fmt(step.next_x), fmt(step.next_y)

    start = ColumnVector(top=x0, bottom=y0)
    grad = ColumnVector(top=gx, bottom=gy)

    text = [
        f"∇f({x0}, {y0}) = {grad.text()}",
        f"(x₁, y₁) = {start.text()} − {a} · {grad.text()}",
        f"So, x₁ = {x0} − {a}·{gx} = {x1}",
        f"and y₁ = {y0} − {a}·{gy} = {y1}",
        f"Answer: (x₁, y₁) = ({x1}, {y1})",
    ]
    html = "".join(
        [
            f"<div>∇f({x0}, {y0}) = {grad.html()}</div>",
            f"<div>(x₁, y₁) = {start.html()} − {a} · {grad.html()}</div>",
            f"<div>So, x₁ = {x0} − {a}·{gx} = {_strong(x1)}</div>",
            f"<div>and y₁ = {y0} − {a}·{gy} = {_strong(y1)}</div>",
            "<hr>",
            f"<div><strong>Answer:</strong> (x₁, y₁) = ({_code(x1)}, {_code(y1)})</div>",
        ]
    )
    return Rendered(text=text, html=html)


def answer_pair(step: StepResult) -> str:
    return f"({fmt(step.next_x)}, {fmt(step.next_y)})"
