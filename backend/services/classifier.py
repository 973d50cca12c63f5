"""Gatekeeper deciding whether extracted text plausibly is a resume."""

import logging

from services.lexicon import MIN_RESUME_SIGNALS, RESUME_SIGNALS
from services.text_features import find_terms

logger = logging.getLogger(__name__)


def resume_signals(text: str) -> list[str]:
    """Distinct resume-signal terms found in the text."""
    return find_terms(text.lower(), RESUME_SIGNALS)


def is_resume(text: str) -> bool:
    signals = resume_signals(text)
    logger.debug("Resume signals found: %s", signals)
    return len(signals) >= MIN_RESUME_SIGNALS
