"""Shared test configuration, pytest markers and sample documents."""

import os

import pytest

# Must be set before config.py is imported by any test module
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from models.responses import Profile  # noqa: E402
from services.pipeline.lens_registry import clear as clear_registry  # noqa: E402


SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567

Summary
Frontend developer focused on React and TypeScript.

Experience
Software Engineer Intern | Acme Corp | 2024 - 2025
- Engineered a React dashboard used by 1200 analysts, improving load time by 40%
- Optimized GraphQL queries, reducing API latency by 35% and saving $12,000 per year
- Built CI/CD pipelines with Docker, cutting release time from 3 days to 4 hours

Projects
- Designed an accessibility audit tool for the university website
- Helped organize weekly code reviews for the team

Education
B.Tech in Computer Science, State University

Skills
JavaScript, TypeScript, React, Node, HTML, CSS, Tailwind, Jest, Git, AWS
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start every test with fresh lens instances."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def frontend_profile() -> Profile:
    return Profile(
        target_role="Frontend Developer",
        interested_technologies=["React", "Tailwind", "GraphQL"],
    )
