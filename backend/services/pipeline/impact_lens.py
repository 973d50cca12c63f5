"""Lens 3: Impact & achievement - do bullets describe results or duties?

Each content line is classified by the verbs it uses. A strong verb always
wins: a line with both a weak phrase and a strong verb counts as strong.

    score = strong_ratio * 100
            + 20 if no weak lines
            + 15 if at least 3 strong lines
    clamped to [10, 100]
"""

from models.responses import CheckItem, LensResult, Profile, RewriteSuggestion
from services.lexicon import RESULT_RE, STRONG_VERBS, WEAK_PHRASES
from services.pipeline.base import BaseLens
from services.text_features import clamp, content_lines, find_terms, round_half_up

MIN_SCORE = 10
NO_WEAK_BONUS = 20
STRONG_BONUS = 15
STRONG_BONUS_LINES = 3
MAX_EXAMPLES = 2
EXAMPLE_CHARS = 80


class ImpactLens(BaseLens):
    name = "impact"
    title = "Impact & Achievement"
    subtitle = "Narrative Strength"
    pass_threshold = 75
    warn_threshold = 45

    def analyze(self, text: str, profile: Profile) -> LensResult:
        lines = content_lines(text)
        weak_count = 0
        strong_count = 0
        weak_examples: list[str] = []

        for line in lines:
            lower = line.lower().strip()
            has_weak = any(p in lower for p in WEAK_PHRASES)
            has_strong = any(v in lower for v in STRONG_VERBS)
            if has_strong:
                strong_count += 1
            elif has_weak:
                weak_count += 1
                if len(weak_examples) < MAX_EXAMPLES:
                    weak_examples.append(line.strip()[:EXAMPLE_CHARS])

        strong_ratio = strong_count / max(len(lines), 1)
        raw = strong_ratio * 100
        if weak_count == 0:
            raw += NO_WEAK_BONUS
        if strong_count >= STRONG_BONUS_LINES:
            raw += STRONG_BONUS
        score = clamp(round_half_up(min(100, raw)), low=MIN_SCORE)

        text_lower = text.lower()
        checks = [
            _strong_check(strong_count, find_terms(text_lower, STRONG_VERBS)),
            _weak_check(weak_count, find_terms(text_lower, WEAK_PHRASES)),
            _result_check(any(RESULT_RE.search(line) for line in lines)),
        ]

        if score >= self.pass_threshold:
            summary = "Your bullets are impact-driven. Strong narrative with action verbs."
        else:
            summary = (
                f"{weak_count} bullet points describe tasks instead of results. "
                "Narrative needs strengthening."
            )

        return LensResult(
            score=score,
            status=self.status_for(score),
            summary=summary,
            checks=checks,
            rewrites=[
                RewriteSuggestion(
                    original=f'"{ex}{"..." if len(ex) >= EXAMPLE_CHARS else ""}"',
                    rewrite=(
                        'Replace with: "Engineered/Optimized [specific thing], resulting '
                        'in [measurable outcome] for [stakeholder]"'
                    ),
                    reason="Recruiters spend 7 seconds scanning. Impact-driven bullets survive that filter.",
                )
                for ex in weak_examples
            ],
        )


def _strong_check(strong_count: int, verbs: list[str]) -> CheckItem:
    if strong_count >= 3:
        status = "pass"
    elif strong_count >= 1:
        status = "warn"
    else:
        status = "fail"
    if strong_count > 0:
        detail = f"Found {strong_count} strong verbs: {', '.join(verbs[:4])}"
    else:
        detail = (
            'No strong action verbs detected. Use "Engineered", "Optimized", '
            '"Delivered" instead of "Worked on".'
        )
    return CheckItem(label="Strong Action Verbs", status=status, detail=detail)


def _weak_check(weak_count: int, phrases: list[str]) -> CheckItem:
    if weak_count == 0:
        return CheckItem(
            label="Weak/Passive Language",
            status="pass",
            detail="No passive language detected. Your bullets read confidently.",
        )
    return CheckItem(
        label="Weak/Passive Language",
        status="warn" if weak_count <= 2 else "fail",
        detail=f"{weak_count} instances of weak language: {', '.join(phrases[:3])}",
    )


def _result_check(has_results: bool) -> CheckItem:
    if has_results:
        return CheckItem(
            label="Problem → Action → Result",
            status="pass",
            detail="Some bullets follow the PAR framework showing outcomes.",
        )
    return CheckItem(
        label="Problem → Action → Result",
        status="fail",
        detail="No result-oriented language found. Bullets describe tasks, not achievements.",
    )
