"""Lens 5: Role alignment - skills, education, projects and experience
measured against the candidate's target role."""

from models.responses import CheckItem, LensResult, Profile, RewriteSuggestion
from services.lexicon import EDUCATION_TERMS, EXPERIENCE_TERMS, PROJECT_TERMS
from services.pipeline.base import BaseLens
from services.text_features import (
    clamp,
    find_terms,
    normalize_role,
    role_keywords,
    round_half_up,
)

MIN_SCORE = 10
NO_EDUCATION_PENALTY = 10
FEW_PROJECTS_PENALTY = 15
NO_EXPERIENCE_PENALTY = 10
MAX_MISSING_LISTED = 5


class RoleAlignmentLens(BaseLens):
    name = "role"
    title = "Role Alignment"
    subtitle = "Dream Job Match"
    pass_threshold = 75
    warn_threshold = 50

    def analyze(self, text: str, profile: Profile) -> LensResult:
        lower = text.lower()
        target_role = normalize_role(profile.target_role)
        keywords = role_keywords(target_role)

        matched = find_terms(lower, keywords)
        unmatched = [kw for kw in keywords if kw not in lower]
        skill_match = round_half_up(len(matched) / len(keywords) * 100)

        has_education = bool(find_terms(lower, EDUCATION_TERMS))
        project_mentions = len(find_terms(lower, PROJECT_TERMS))
        has_experience = bool(find_terms(lower, EXPERIENCE_TERMS))

        score = skill_match
        if not has_education:
            score -= NO_EDUCATION_PENALTY
        if project_mentions < 2:
            score -= FEW_PROJECTS_PENALTY
        if not has_experience:
            score -= NO_EXPERIENCE_PENALTY
        score = clamp(score, low=MIN_SCORE)

        top = f"Top: {', '.join(matched[:5])}" if matched else ""
        checks = [
            CheckItem(
                label="Skills → Role Match",
                status="pass" if skill_match >= 60 else "warn" if skill_match >= 35 else "fail",
                detail=(
                    f"{len(matched)}/{len(keywords)} required skills found "
                    f"({skill_match}% match). {top}"
                ).rstrip(),
            ),
            CheckItem(
                label="Academic Alignment",
                status="pass" if has_education else "warn",
                detail=(
                    "Relevant academic background detected for this role." if has_education
                    else "No clear academic background detected. Consider adding your degree and field of study."
                ),
            ),
            CheckItem(
                label="Project Portfolio",
                status="pass" if project_mentions >= 4 else "warn" if project_mentions >= 2 else "fail",
                detail=(
                    f"Strong project presence with {project_mentions} project-related mentions."
                    if project_mentions >= 4
                    else f"Only {project_mentions} project mentions. Add 2-3 role-specific "
                    "projects to strengthen alignment."
                ),
            ),
            CheckItem(
                label="Experience Relevance",
                status="pass" if has_experience else "warn",
                detail=(
                    "Professional experience section detected and relevant." if has_experience
                    else "No clear professional experience section. Add internships, "
                    "freelance work, or open-source contributions."
                ),
            ),
        ]

        if score >= self.pass_threshold:
            summary = (
                f'Strong alignment with "{target_role}" role. Skills and experience match well.'
            )
        else:
            summary = (
                f'Your profile needs strengthening for "{target_role}". '
                f"{len(unmatched)} relevant skills are missing."
            )

        return LensResult(
            score=score,
            status=self.status_for(score),
            summary=summary,
            checks=checks,
            rewrites=[RewriteSuggestion(
                original=f"Current role alignment: {skill_match}%",
                rewrite=(
                    "Add missing skills to your projects section: "
                    f"{', '.join(unmatched[:MAX_MISSING_LISTED])}"
                ),
                reason=f'These keywords appear in 80%+ of "{target_role}" job postings for 2026.',
            )],
        )
