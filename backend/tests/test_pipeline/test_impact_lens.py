"""Tests for the impact & achievement lens."""

from models.responses import Profile
from services.pipeline.impact_lens import ImpactLens


def _checks(result):
    return {c.label: c for c in result.checks}


class TestImpactLens:
    def setup_method(self):
        self.lens = ImpactLens()
        self.profile = Profile()

    def test_single_weak_bullet(self):
        result = self.lens.analyze("- Helped manage the team", self.profile)
        checks = _checks(result)
        assert checks["Weak/Passive Language"].status == "warn"
        assert checks["Weak/Passive Language"].detail.startswith("1 instances")
        assert checks["Strong Action Verbs"].status == "fail"
        assert checks["Problem → Action → Result"].status == "fail"
        assert result.score == 10  # floor
        assert result.status == "fail"

    def test_weak_rewrite_quotes_offending_line(self):
        result = self.lens.analyze("- Helped manage the team", self.profile)
        assert len(result.rewrites) == 1
        assert result.rewrites[0].original == '"- Helped manage the team"'
        assert "Engineered/Optimized" in result.rewrites[0].rewrite

    def test_sample_resume(self, sample_resume):
        result = self.lens.analyze(sample_resume, self.profile)
        checks = _checks(result)
        # 4 strong bullets, 1 weak bullet out of 5: 80 + 15 bonus
        assert result.score == 95
        assert result.status == "pass"
        assert checks["Strong Action Verbs"].status == "pass"
        assert checks["Weak/Passive Language"].status == "warn"
        assert checks["Problem → Action → Result"].status == "pass"

    def test_strong_verb_wins_over_weak_phrase(self):
        text = "- Helped and engineered a new billing service"
        result = self.lens.analyze(text, self.profile)
        checks = _checks(result)
        assert checks["Weak/Passive Language"].status == "pass"
        assert checks["Strong Action Verbs"].status == "warn"
        # ratio 1.0 + no-weak bonus, capped at 100
        assert result.score == 100
        assert result.rewrites == []

    def test_more_than_two_weak_lines_fail(self):
        text = "\n".join([
            "- Responsible for the weekly report",
            "- Assisted the senior staff daily",
            "- Worked on internal dashboards",
        ])
        result = self.lens.analyze(text, self.profile)
        assert _checks(result)["Weak/Passive Language"].status == "fail"
        assert len(result.rewrites) == 2

    def test_fallback_to_plain_lines_without_bullets(self):
        text = "Architected the payments platform end to end\nshort\nLaunched three products in a year"
        result = self.lens.analyze(text, self.profile)
        # both long lines are strong, no weak lines
        assert result.score == 100
        assert _checks(result)["Strong Action Verbs"].status == "warn"

    def test_numbered_lines_count_as_bullets(self):
        text = "Intro paragraph about the candidate here\n1. Migrated the monolith to services\n2) Automated nightly data exports"
        result = self.lens.analyze(text, self.profile)
        # the intro line is ignored once bullets exist
        assert result.score == 100

    def test_empty_text_floors(self):
        result = self.lens.analyze("", self.profile)
        assert result.score == 20  # no lines: only the no-weak bonus
        assert result.status == "fail"
        assert len(result.checks) == 3

    def test_long_example_truncated(self):
        line = "- Responsible for " + "x" * 120
        result = self.lens.analyze(line, self.profile)
        original = result.rewrites[0].original
        assert original.endswith('..."')
        assert len(original) == 80 + len('"..."')

    def test_monotonic_in_strong_verbs(self):
        lines = [
            "- Helped the data team with reports",
            "- Worked on the onboarding flow",
            "- Wrote internal documentation pages",
        ]
        previous = self.lens.analyze("\n".join(lines), self.profile).score
        for verb in ("Engineered", "Optimized", "Delivered", "Scaled"):
            lines.append(f"- {verb} the customer portal for partners")
            score = self.lens.analyze("\n".join(lines), self.profile).score
            assert score >= previous
            previous = score
