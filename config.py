import logging
import os

MAX_QUESTIONS = 100


def _log_level(name: str) -> str:
    # getLevelName maps known names to ints; anything else falls back to INFO
    name = name.strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def _page_size(raw: str, default: int = 10) -> int:
    try:
        n = int(raw)
    except ValueError:
        return default
    return max(1, min(n, MAX_QUESTIONS))


LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL", "INFO"))

# Next.js dev server and production site by default
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]

QUESTIONS_PER_PAGE = _page_size(os.getenv("QUESTIONS_PER_PAGE", "10"))

# Unset -> fresh randomness per request; set -> reproducible question sets
_seed = os.getenv("PRACTICE_SEED", "").strip()
PRACTICE_SEED = int(_seed) if _seed else None

# Absolute tolerance when marking typed answers against the exact step
MARK_TOLERANCE = float(os.getenv("MARK_TOLERANCE", "5e-5"))
