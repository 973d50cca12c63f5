"""Lens 4: Quantification audit - how many numbers back up the claims.

Five regex families are counted independently over the whole text. The same
digits may satisfy more than one family ("3 hours" is also a time metric and
"2024" is also a scale number); overlap is not corrected.
"""

import re

from models.responses import CheckItem, LensResult, Profile, RewriteSuggestion
from services.lexicon import (
    CURRENCY_RE,
    DEFAULT_BULLET_COUNT,
    MULTIPLIER_RE,
    PERCENT_RE,
    RUPEE_RE,
    SCALE_RE,
    TIME_RE,
)
from services.pipeline.base import BaseLens
from services.text_features import clamp, count_marker_bullets, round_half_up

MIN_SCORE = 5
SATURATED_SCORE = 95

# Example transformations shown for every resume, not derived from its text
STATIC_REWRITES: tuple[RewriteSuggestion, ...] = (
    RewriteSuggestion(
        original='"Improved application performance"',
        rewrite=(
            '"Reduced API response time from 1.2s to 180ms (85% improvement), '
            'decreasing server costs by $2,400/month"'
        ),
        reason="One sentence, four metrics. This is what recruiters scan for.",
    ),
    RewriteSuggestion(
        original='"Managed intern onboarding"',
        rewrite=(
            '"Onboarded 12 interns across 2 cohorts, achieving 95% retention rate '
            'and reducing ramp-up time from 4 weeks to 10 days"'
        ),
        reason="Numbers transform soft skills into hard evidence.",
    ),
)


def _matches(pattern: re.Pattern, text: str) -> list[str]:
    return [m.group(0) for m in pattern.finditer(text)]


class MetricsLens(BaseLens):
    name = "metrics"
    title = "Quantification Audit"
    subtitle = "Metrics Density"
    pass_threshold = 70
    warn_threshold = 40

    def analyze(self, text: str, profile: Profile) -> LensResult:
        percents = _matches(PERCENT_RE, text)
        currency = _matches(CURRENCY_RE, text) or _matches(RUPEE_RE, text)
        scale = _matches(SCALE_RE, text)
        multipliers = _matches(MULTIPLIER_RE, text)
        durations = _matches(TIME_RE, text)

        families = (
            (percents, "percentage(s)"),
            (currency, "currency figure(s)"),
            (scale, "large number(s)"),
            (multipliers, "multiplier(s)"),
            (durations, "time metric(s)"),
        )
        total = sum(len(found) for found, _ in families)
        found_types = [f"{len(found)} {kind}" for found, kind in families if found]

        bullet_count = count_marker_bullets(text) or DEFAULT_BULLET_COUNT
        density = round_half_up(total / bullet_count * 100)
        score = SATURATED_SCORE if density > 100 else density
        score = clamp(score, low=MIN_SCORE)

        checks = [
            CheckItem(
                label="Percentage Metrics",
                status=_graded(len(percents)),
                detail=(
                    f"Found: {', '.join(percents[:3])}" if percents
                    else "No percentages found. Add improvement rates and growth numbers."
                ),
            ),
            CheckItem(
                label="Revenue / Cost Impact",
                status="pass" if currency else "fail",
                detail=(
                    f"Found: {', '.join(currency[:3])}" if currency
                    else "No financial metrics. Quantify savings, revenue, or budget managed."
                ),
            ),
            CheckItem(
                label="Scale Indicators",
                status=_graded(len(scale)),
                detail=(
                    f"{len(scale)} scale numbers found (users, records, etc.)" if scale
                    else "No scale metrics. Add user counts, data volumes, request numbers."
                ),
            ),
            CheckItem(
                label="Time-Based Metrics",
                status="pass" if durations else "fail",
                detail=(
                    f"Found: {', '.join(durations[:3])}" if durations
                    else "No timeline improvements. Add delivery speed, uptime stats."
                ),
            ),
        ]

        if total == 0:
            summary = "Zero quantifiable metrics found. This is a critical gap for recruiter attention."
        elif total <= 3:
            summary = f"Only {total} metrics found ({', '.join(found_types)}). Density is low."
        else:
            summary = f"{total} metrics detected ({', '.join(found_types)}). Good quantification."

        return LensResult(
            score=score,
            status=self.status_for(score),
            summary=summary,
            checks=checks,
            rewrites=[r.model_copy() for r in STATIC_REWRITES],
        )


def _graded(count: int) -> str:
    if count >= 2:
        return "pass"
    return "warn" if count >= 1 else "fail"
