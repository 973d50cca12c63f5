"""Audit orchestrator: classifier gate, five lenses, overall score.

Flow:
    resume_text + profile
      ├─ is_resume(resume_text)        → False: AuditResult(is_resume=False)
      │                                  (no lens runs)
      ├─ ats / keyword / impact / metrics / role lenses (independent)
      │                                        ↓
      └─ aggregate_overall_score(lenses) → AuditResult.overall_score
"""

import logging
from collections.abc import Iterable, Mapping

from models.responses import AuditResult, LensResult, Profile
from services.classifier import is_resume
from services.pipeline.base import BaseLens
from services.pipeline.lens_registry import all_lenses
from services.text_features import round_half_up

logger = logging.getLogger(__name__)


def aggregate_overall_score(lenses: Mapping[str, LensResult]) -> int:
    """Rounded arithmetic mean of the lens scores (0 when there are none)."""
    if not lenses:
        return 0
    scores = [lens.score for lens in lenses.values()]
    return round_half_up(sum(scores) / len(scores))


def run_audit(
    resume_text: str,
    profile: Profile | None = None,
    lenses: Iterable[BaseLens] | None = None,
) -> AuditResult:
    """Score a resume through every lens. Pure and synchronous."""
    if not is_resume(resume_text):
        logger.info("Audit rejected: text does not look like a resume")
        return AuditResult(is_resume=False)

    # Copy so no lens can alias into caller-owned profile data
    profile = profile.model_copy(deep=True) if profile else Profile()
    selected = list(lenses) if lenses is not None else all_lenses()

    results = {lens.name: lens(resume_text, profile) for lens in selected}
    overall = aggregate_overall_score(results)
    logger.info(
        "Audit complete: overall=%d %s",
        overall,
        {name: r.score for name, r in results.items()},
    )
    return AuditResult(is_resume=True, overall_score=overall, lenses=results)
