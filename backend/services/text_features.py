"""Lexical feature extraction shared by the lenses.

All matching is case-insensitive substring matching against the lexicon
tables; no tokenization or stemming is applied.
"""

import math
from collections.abc import Iterable

from services.lexicon import (
    BULLET_RE,
    DEFAULT_ROLE_KEY,
    DEFAULT_TARGET_ROLE,
    NUMBERED_RE,
    ROLE_KEYWORDS,
)

# Lines at or below this many characters are ignored by the impact lens
MIN_CONTENT_LINE_CHARS = 15
MAX_FALLBACK_LINES = 15


def round_half_up(value: float) -> int:
    """Round .5 upward (62.5 -> 63) rather than to the nearest even integer."""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def word_count(text: str) -> int:
    return len(text.split())


def find_terms(lower_text: str, terms: Iterable[str]) -> list[str]:
    """Return the terms present in already-lowercased text, in table order."""
    return [t for t in terms if t in lower_text]


def normalize_role(target_role: str | None) -> str:
    role = (target_role or "").strip().lower()
    return role or DEFAULT_TARGET_ROLE


def resolve_role_key(target_role: str | None) -> str:
    """Map a free-text role to a canonical ROLE_KEYWORDS key.

    The first canonical key contained in the role wins, so
    "Senior Frontend Developer" resolves to "frontend developer".
    """
    role = normalize_role(target_role)
    for key in ROLE_KEYWORDS:
        if key != DEFAULT_ROLE_KEY and key in role:
            return key
    return DEFAULT_ROLE_KEY


def role_keywords(target_role: str | None) -> tuple[str, ...]:
    return ROLE_KEYWORDS[resolve_role_key(target_role)]


def normalize_technologies(technologies: Iterable[str] | None) -> list[str]:
    """Lower-case, strip and de-duplicate technologies; blanks are dropped."""
    seen: dict[str, None] = {}
    for tech in technologies or ():
        cleaned = tech.strip().lower()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_RE.match(line) or NUMBERED_RE.match(line))


def content_lines(text: str) -> list[str]:
    """Bullet lines of the resume, or its first non-trivial lines if none."""
    lines = [ln for ln in text.split("\n") if len(ln.strip()) > MIN_CONTENT_LINE_CHARS]
    bullets = [ln for ln in lines if is_bullet_line(ln)]
    return bullets if bullets else lines[:MAX_FALLBACK_LINES]


def count_marker_bullets(text: str) -> int:
    """Count lines opening with a bullet marker (numbered lines excluded)."""
    return sum(1 for ln in text.split("\n") if BULLET_RE.match(ln))


def preview(items: list[str], limit: int) -> str:
    """Comma-join the first `limit` items, noting how many were left out."""
    shown = ", ".join(items[:limit])
    if len(items) > limit:
        shown += f" + {len(items) - limit} more"
    return shown
