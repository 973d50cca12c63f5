"""Vocabulary tables for the resume lenses and interview scorers.

Every keyword list, phrase list and regex family the scorers use lives here
so it can be tested and extended without touching scoring logic. Bump
LEXICON_VERSION whenever a table changes; it is reported by /health.
"""

import re
from types import MappingProxyType

LEXICON_VERSION = "2026.1"

DEFAULT_TARGET_ROLE = "software engineer"
DEFAULT_ROLE_KEY = "default"

# ---------------------------------------------------------------------------
# Role keyword tables (order matters: first key contained in the role wins)
# ---------------------------------------------------------------------------
ROLE_KEYWORDS: MappingProxyType = MappingProxyType({
    "software engineer": (
        "react", "javascript", "typescript", "node", "python", "java", "api",
        "rest", "graphql", "sql", "nosql", "mongodb", "postgresql", "docker",
        "kubernetes", "ci/cd", "aws", "azure", "gcp", "git", "agile", "scrum",
        "microservices", "scalability", "testing", "unit test", "tdd", "oop",
        "design patterns", "data structures", "algorithms",
    ),
    "web developer": (
        "html", "css", "javascript", "typescript", "react", "vue", "angular",
        "next.js", "node", "express", "tailwind", "sass", "responsive",
        "accessibility", "seo", "webpack", "vite", "api", "rest", "graphql",
        "git", "figma", "ui/ux", "performance", "cross-browser",
        "progressive web app", "pwa",
    ),
    "data scientist": (
        "python", "r", "sql", "machine learning", "deep learning",
        "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy",
        "statistics", "data visualization", "tableau", "power bi", "nlp",
        "neural network", "regression", "classification", "clustering",
        "feature engineering", "a/b testing", "jupyter", "spark", "hadoop",
        "etl",
    ),
    "frontend developer": (
        "html", "css", "javascript", "typescript", "react", "vue", "angular",
        "next.js", "tailwind", "sass", "responsive", "accessibility", "seo",
        "webpack", "vite", "figma", "ui/ux", "performance", "state management",
        "redux", "testing", "jest", "cypress", "storybook", "design system",
    ),
    "backend developer": (
        "python", "java", "node", "go", "rust", "api", "rest", "graphql",
        "sql", "nosql", "mongodb", "postgresql", "redis", "docker",
        "kubernetes", "aws", "microservices", "message queue", "kafka",
        "rabbitmq", "ci/cd", "authentication", "security", "caching",
        "load balancing",
    ),
    "devops engineer": (
        "docker", "kubernetes", "terraform", "ansible", "jenkins", "ci/cd",
        "aws", "azure", "gcp", "linux", "bash", "python", "monitoring",
        "prometheus", "grafana", "elk", "infrastructure as code", "networking",
        "security", "automation", "git", "helm", "istio",
    ),
    DEFAULT_ROLE_KEY: (
        "communication", "teamwork", "leadership", "problem solving",
        "analytical", "project management", "agile", "scrum", "git", "python",
        "javascript", "sql", "api", "cloud", "docker", "testing", "ci/cd",
        "data analysis",
    ),
})

# ---------------------------------------------------------------------------
# Resume classifier
# ---------------------------------------------------------------------------
RESUME_SIGNALS: tuple[str, ...] = (
    "experience", "education", "skills", "projects", "work", "employment",
    "intern", "developer", "engineer", "summary", "objective",
    "certifications", "resume", "curriculum vitae", "cv",
)
MIN_RESUME_SIGNALS = 2

# ---------------------------------------------------------------------------
# ATS lens
# ---------------------------------------------------------------------------
ATS_GOOD_HEADERS: tuple[str, ...] = (
    "experience", "education", "skills", "projects", "certifications",
    "summary", "objective", "work history", "professional experience",
    "technical skills",
)
ATS_BAD_HEADERS: tuple[str, ...] = (
    "my journey", "my story", "about me", "who i am", "my background",
    "professional story", "career narrative",
)
EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
PHONE_RE = re.compile(r"\+?[\d\s\-()]{7,}")
DECORATIVE_CHARS_RE = re.compile(r"[│┃┆═╔╗╚╝►◆●★✓✗▸▪▫⊙⊕]")

# ---------------------------------------------------------------------------
# Keyword lens
# ---------------------------------------------------------------------------
INDUSTRY_TERMS: tuple[str, ...] = (
    "2024", "2025", "2026", "cloud", "ai", "machine learning", "devops",
    "security",
)

# ---------------------------------------------------------------------------
# Impact lens
# ---------------------------------------------------------------------------
WEAK_PHRASES: tuple[str, ...] = (
    "responsible for", "helped", "assisted", "worked on", "involved in",
    "participated in", "tasked with", "duties included", "contributed to",
    "supported", "handled", "managed to",
)
STRONG_VERBS: tuple[str, ...] = (
    "engineered", "architected", "spearheaded", "optimized", "automated",
    "reduced", "increased", "delivered", "launched", "designed",
    "implemented", "scaled", "migrated", "built", "transformed",
    "accelerated", "streamlined", "pioneered",
)
RESULT_RE = re.compile(
    r"result|led to|improved|increased|decreased|reduced|achieved|saving",
    re.IGNORECASE,
)

# Bullets: -, •, ▪, ▸, * followed by whitespace; numbered "1." / "1)"
BULLET_RE = re.compile(r"^\s*[-•▪▸*]\s")
NUMBERED_RE = re.compile(r"^\s*\d+[.)]\s")

# ---------------------------------------------------------------------------
# Metrics lens (families may overlap on the same digits)
# ---------------------------------------------------------------------------
PERCENT_RE = re.compile(r"\d+\s*%")
CURRENCY_RE = re.compile(r"\$\s*[\d,]+\.?\d*")
RUPEE_RE = re.compile(r"₹\s*[\d,]+")
SCALE_RE = re.compile(r"\b\d{3,}\b")
MULTIPLIER_RE = re.compile(r"\d+x\s", re.IGNORECASE)
TIME_RE = re.compile(r"\d+\s*(?:hours|days|weeks|months|years|minutes)\b", re.IGNORECASE)
DEFAULT_BULLET_COUNT = 5

# ---------------------------------------------------------------------------
# Role alignment lens
# ---------------------------------------------------------------------------
EDUCATION_TERMS: tuple[str, ...] = (
    "computer science", "software", "engineering", "information technology",
    "data science", "mathematics", "statistics", "bca", "mca", "b.tech",
    "m.tech", "bsc", "msc", "bachelor", "master", "degree",
)
PROJECT_TERMS: tuple[str, ...] = (
    "project", "built", "developed", "created", "designed", "implemented",
    "application", "system", "platform", "tool", "website", "app",
)
EXPERIENCE_TERMS: tuple[str, ...] = (
    "intern", "developer", "engineer", "analyst", "associate", "assistant",
    "junior", "senior", "lead", "manager", "experience", "worked at",
    "employment",
)

# ---------------------------------------------------------------------------
# Interview scoring
# ---------------------------------------------------------------------------
DIFFICULTIES: tuple[str, ...] = ("Friendly", "Standard", "Strict")
DEFAULT_DIFFICULTY = "Standard"

ANSWER_TECH_TERMS: tuple[str, ...] = (
    "api", "database", "component", "algorithm", "architecture",
    "performance", "cache", "server", "client", "function", "class",
    "module", "deploy", "test", "security", "scale", "optimize", "pattern",
    "framework", "library",
)
ANSWER_EXAMPLE_RE = re.compile(
    r"for example|for instance|such as|like when|in my project|i built|i used|i implemented",
    re.IGNORECASE,
)
ANSWER_TRADEOFF_RE = re.compile(
    r"however|although|tradeoff|downside|alternatively|on the other hand|but|drawback",
    re.IGNORECASE,
)

# (good, avg) cut-offs; a stricter interviewer needs a higher score per level
LEVEL_THRESHOLDS: MappingProxyType = MappingProxyType({
    "Friendly": (55, 35),
    "Standard": (65, 45),
    "Strict": (75, 55),
})

REPORT_TECH_TERMS: tuple[str, ...] = (
    "api", "database", "component", "algorithm", "architecture",
    "performance", "cache", "server", "function", "class", "deploy", "test",
    "security", "scale", "optimize", "framework", "library", "react", "node",
    "python", "sql", "docker", "kubernetes", "aws", "css", "html",
    "javascript", "typescript", "git", "http", "rest", "graphql", "mongodb",
    "redis",
)
REPORT_EXAMPLE_RE = re.compile(
    r"for example|for instance|such as|in my project|i built|i used|i implemented|we developed",
    re.IGNORECASE,
)
REPORT_TRADEOFF_RE = re.compile(
    r"however|although|tradeoff|downside|alternatively|on the other hand|drawback|limitation",
    re.IGNORECASE,
)
STRUCTURE_RE = re.compile(
    r"first|second|third|finally|additionally|moreover|in conclusion|to summarize",
    re.IGNORECASE,
)
FILLER_RE = re.compile(
    r"um+|uh+|like,|you know|basically|actually|literally|sort of|kind of",
    re.IGNORECASE,
)
DIGIT_RE = re.compile(r"\d")

FEEDBACK_POOLS: MappingProxyType = MappingProxyType({
    "Friendly": MappingProxyType({
        "good": (
            "That was a solid answer! You explained it clearly. Let us continue.",
            "Nice work! I can see you have practical experience here.",
            "Good answer! You covered the key points well.",
        ),
        "avg": (
            "Decent answer. Try to add a specific example next time.",
            "You are on the right track. A bit more detail would strengthen your response.",
            "Fair enough. Consider mentioning the tradeoffs in your next answer.",
        ),
        "weak": (
            "That could use more depth, but I appreciate the attempt. Let us try another.",
            "A bit vague. Try to be more specific with technologies or numbers.",
            "Needs work, but do not worry, practice helps. Next question.",
        ),
    }),
    "Standard": MappingProxyType({
        "good": (
            "Strong answer. Good technical depth and structure. Moving on.",
            "Well articulated. You demonstrated solid understanding.",
            "Impressive answer. The specific examples were effective.",
        ),
        "avg": (
            "Acceptable, but you missed discussing the tradeoffs.",
            "You covered the basics. Deeper implementation details would be expected.",
            "Okay, but quantify the impact next time. Numbers are convincing.",
        ),
        "weak": (
            "That answer lacks specificity. Practice articulating concrete solutions.",
            "Too surface-level. Discuss implementation details and edge cases.",
            "Not strong enough. Study the underlying concepts more.",
        ),
    }),
    "Strict": MappingProxyType({
        "good": (
            "Acceptable. You demonstrated strong fundamentals. Continue.",
            "That meets the bar. Good use of specific details and tradeoffs.",
            "Solid. Your systems thinking is evident.",
        ),
        "avg": (
            "Partially correct. You missed critical failure modes.",
            "The basic idea is right, but a senior candidate would go deeper.",
            "Decent attempt, but I expect precise terminology and quantified impact.",
        ),
        "weak": (
            "That would not pass the bar at a top company. More depth needed.",
            "Too vague. In a real interview, this would be a red flag.",
            "Insufficient. Study the fundamentals and practice precision.",
        ),
    }),
})
