"""Lens 1: ATS compatibility - will a parser read this resume correctly?

Starts from 100 and only subtracts, one deduction per failed check:
    headers   -25 (non-standard) / -12 (too few standard)
    contact   -20 (no email)     / -8  (no phone)
    length    -20 (too short)    / -8  (too long)
    glyphs    -15 (decorative characters)
"""

from models.responses import CheckItem, LensResult, Profile, RewriteSuggestion
from services.lexicon import (
    ATS_BAD_HEADERS,
    ATS_GOOD_HEADERS,
    DECORATIVE_CHARS_RE,
    EMAIL_RE,
    PHONE_RE,
)
from services.pipeline.base import BaseLens
from services.text_features import clamp, find_terms, word_count

MIN_GOOD_HEADERS = 3
MIN_WORDS = 200
MAX_WORDS = 1200
SENIOR_WORDS = 700
MAX_DECORATIVE_CHARS = 5


class ATSLens(BaseLens):
    name = "ats"
    title = "ATS Compatibility"
    subtitle = "Parsing Health"
    pass_threshold = 80
    warn_threshold = 50

    def analyze(self, text: str, profile: Profile) -> LensResult:
        lower = text.lower()
        score = 100
        checks: list[CheckItem] = []

        good_headers = find_terms(lower, ATS_GOOD_HEADERS)
        bad_headers = find_terms(lower, ATS_BAD_HEADERS)
        check, penalty = _check_headers(good_headers, bad_headers)
        checks.append(check)
        score -= penalty

        check, penalty = _check_contact(text)
        checks.append(check)
        score -= penalty

        check, penalty = _check_length(word_count(text))
        checks.append(check)
        score -= penalty

        check, penalty = _check_characters(text)
        checks.append(check)
        score -= penalty

        score = clamp(score)
        return LensResult(
            score=score,
            status=self.status_for(score),
            summary=self._summary(score, checks),
            checks=checks,
            rewrites=_rewrites(bad_headers),
        )

    def _summary(self, score: int, checks: list[CheckItem]) -> str:
        if score >= self.pass_threshold:
            return "Your resume structure is ATS-friendly. Minor optimizations possible."
        if score >= self.warn_threshold:
            issues = sum(1 for c in checks if c.status != "pass")
            return f"{issues} structural issues may affect ATS parsing."
        return (
            "Critical formatting issues detected. Your resume may not parse "
            "correctly in most ATS systems."
        )


def _check_headers(good: list[str], bad: list[str]) -> tuple[CheckItem, int]:
    label = "Standard Section Headers"
    if len(good) >= MIN_GOOD_HEADERS:
        return CheckItem(
            label=label,
            status="pass",
            detail=f"Found: {', '.join(good[:4])}. ATS parsers will identify your sections correctly.",
        ), 0
    if bad:
        quoted = '", "'.join(bad)
        return CheckItem(
            label=label,
            status="fail",
            detail=(
                f'Non-standard headers detected: "{quoted}". Use standard headers '
                'like "Experience", "Education", "Skills".'
            ),
        ), 25
    return CheckItem(
        label=label,
        status="warn",
        detail=(
            f"Only {len(good)} standard headers found. Add clear sections for "
            "Experience, Education, Skills."
        ),
    ), 12


def _check_contact(text: str) -> tuple[CheckItem, int]:
    label = "Contact Information"
    has_email = bool(EMAIL_RE.search(text))
    has_phone = bool(PHONE_RE.search(text))
    if has_email and has_phone:
        return CheckItem(
            label=label,
            status="pass",
            detail="Email and phone number detected in plain text. Parsers can extract these.",
        ), 0
    email_note = "Email found" if has_email else "No email detected"
    phone_note = "Phone found" if has_phone else "No phone number detected"
    return CheckItem(
        label=label,
        status="warn" if has_email else "fail",
        detail=f"{email_note}. {phone_note}. Ensure contact info is in plain text.",
    ), 8 if has_email else 20


def _check_length(words: int) -> tuple[CheckItem, int]:
    label = "Resume Length"
    if MIN_WORDS < words < MAX_WORDS:
        kind = "senior" if words > SENIOR_WORDS else "standard"
        return CheckItem(
            label=label,
            status="pass",
            detail=f"{words} words, a good length for a {kind} resume.",
        ), 0
    if words <= MIN_WORDS:
        return CheckItem(
            label=label,
            status="fail",
            detail=f"Only {words} words. Modern resumes should be 300-800 words to pass ATS filters.",
        ), 20
    return CheckItem(
        label=label,
        status="warn",
        detail=f"{words} words, quite long. Consider trimming to 600-800 words for better parsing.",
    ), 8


def _check_characters(text: str) -> tuple[CheckItem, int]:
    special = len(DECORATIVE_CHARS_RE.findall(text))
    if special > MAX_DECORATIVE_CHARS:
        return CheckItem(
            label="Special Characters",
            status="fail",
            detail=(
                f"{special} non-standard characters/symbols found. ATS may misread "
                "these. Use simple bullets (•) or dashes (-)."
            ),
        ), 15
    return CheckItem(
        label="Character Encoding",
        status="pass",
        detail="No problematic special characters detected. Clean text encoding.",
    ), 0


def _rewrites(bad_headers: list[str]) -> list[RewriteSuggestion]:
    if not bad_headers:
        return [RewriteSuggestion(
            original="Current structure",
            rewrite="Ensure clear separation: Summary → Experience → Education → Skills → Projects",
            reason="A predictable structure helps ATS parsers extract maximum information.",
        )]
    return [
        RewriteSuggestion(
            original=f'Section header: "{header}"',
            rewrite=f'Use standard header: "{ATS_GOOD_HEADERS[0]}" or "{ATS_GOOD_HEADERS[1]}"',
            reason=(
                "ATS parsers look for standard headers. Non-standard names cause "
                "sections to be skipped entirely."
            ),
        )
        for header in bad_headers
    ]
