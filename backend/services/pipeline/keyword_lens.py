"""Lens 2: Keyword optimization - coverage of the target role's vocabulary.

The keyword universe is the role's curated table plus the candidate's own
interested technologies. The lens score is plain coverage of that universe.
"""

from models.responses import CheckItem, LensResult, Profile, RewriteSuggestion
from services.lexicon import INDUSTRY_TERMS
from services.pipeline.base import BaseLens
from services.text_features import (
    clamp,
    find_terms,
    normalize_role,
    normalize_technologies,
    preview,
    role_keywords,
    round_half_up,
)

FOUND_PASS_RATIO = 0.6
MISSING_FAIL_RATIO = 0.5
MAX_REWRITES = 2


class KeywordLens(BaseLens):
    name = "keyword"
    title = "Keyword Optimization"
    subtitle = "Keyword Coverage"
    pass_threshold = 75
    warn_threshold = 50

    def analyze(self, text: str, profile: Profile) -> LensResult:
        lower = text.lower()
        target_role = normalize_role(profile.target_role)
        user_techs = normalize_technologies(profile.interested_technologies)

        universe = list(dict.fromkeys([*role_keywords(target_role), *user_techs]))
        found = [kw for kw in universe if kw in lower]
        missing = [kw for kw in universe if kw not in lower]
        coverage = round_half_up(len(found) / len(universe) * 100)

        checks: list[CheckItem] = []
        if found:
            checks.append(CheckItem(
                label=f"Found Keywords ({len(found)})",
                status="pass" if len(found) >= len(universe) * FOUND_PASS_RATIO else "warn",
                detail=preview(found, 8),
            ))
        if missing:
            checks.append(CheckItem(
                label=f"Missing Keywords ({len(missing)})",
                status="fail" if len(missing) > len(universe) * MISSING_FAIL_RATIO else "warn",
                detail=preview(missing, 6),
            ))
        if user_techs:
            checks.append(_technology_check(lower, user_techs))
        checks.append(_industry_check(lower))

        score = clamp(coverage)
        if score >= self.pass_threshold:
            summary = (
                f"Strong keyword coverage ({coverage}%). Your resume aligns well "
                f"with {target_role} requirements."
            )
        else:
            summary = (
                f'{len(missing)} high-value keywords missing for "{target_role}". '
                f"Coverage: {coverage}%."
            )

        return LensResult(
            score=score,
            status=self.status_for(score),
            summary=summary,
            checks=checks,
            rewrites=[
                RewriteSuggestion(
                    original=f'Missing keyword: "{kw}"',
                    rewrite=(
                        f'Add "{kw}" naturally into your Experience or Skills section. '
                        f'Example: "Implemented {kw}-based solutions..."'
                    ),
                    reason=f'"{kw}" is a high-value keyword for {target_role} roles in 2026 job postings.',
                )
                for kw in missing[:MAX_REWRITES]
            ],
        )


def _technology_check(lower: str, user_techs: list[str]) -> CheckItem:
    found = [t for t in user_techs if t in lower]
    if len(found) == len(user_techs):
        return CheckItem(
            label="Your Technologies Match",
            status="pass",
            detail=f"All {len(user_techs)} of your technologies are mentioned.",
        )
    absent = [t for t in user_techs if t not in lower]
    return CheckItem(
        label="Your Technologies Match",
        status="warn" if found else "fail",
        detail=(
            f"{len(found)}/{len(user_techs)} of your technologies found. "
            f"Missing: {', '.join(absent)}"
        ),
    )


def _industry_check(lower: str) -> CheckItem:
    modern = find_terms(lower, INDUSTRY_TERMS)
    if len(modern) >= 2:
        status, detail = "pass", f"Modern terms found: {', '.join(modern)}"
    else:
        status = "warn" if modern else "fail"
        detail = (
            "Few modern industry terms. Consider adding references to current "
            "technologies and trends."
        )
    return CheckItem(label="2026 Industry Relevance", status=status, detail=detail)
