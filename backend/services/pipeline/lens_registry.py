"""Lazy lens registry for the audit pipeline.

Lenses are stateless, so one shared instance per name is created on first
use and reused across audits.
"""

import logging

from services.pipeline.base import BaseLens

logger = logging.getLogger(__name__)

LENS_ORDER: tuple[str, ...] = ("ats", "keyword", "impact", "metrics", "role")

_registry: dict[str, BaseLens] = {}


def _create_lens(name: str) -> BaseLens:
    """Factory: create a lens by name with deferred imports."""
    if name == "ats":
        from services.pipeline.ats_lens import ATSLens
        return ATSLens()
    elif name == "keyword":
        from services.pipeline.keyword_lens import KeywordLens
        return KeywordLens()
    elif name == "impact":
        from services.pipeline.impact_lens import ImpactLens
        return ImpactLens()
    elif name == "metrics":
        from services.pipeline.metrics_lens import MetricsLens
        return MetricsLens()
    elif name == "role":
        from services.pipeline.role_lens import RoleAlignmentLens
        return RoleAlignmentLens()
    else:
        raise ValueError(f"Unknown lens: {name}")


def get_lens(name: str) -> BaseLens:
    """Get a lens by name, creating it on first access."""
    if name not in _registry:
        logger.debug("Creating lens: %s", name)
        _registry[name] = _create_lens(name)
    return _registry[name]


def all_lenses() -> list[BaseLens]:
    return [get_lens(name) for name in LENS_ORDER]


def lens_metadata() -> dict[str, dict[str, str]]:
    """Display titles for each lens, in presentation order."""
    return {
        lens.name: {"title": lens.title, "subtitle": lens.subtitle}
        for lens in all_lenses()
    }


def clear() -> None:
    """Drop cached lenses. Useful for testing."""
    _registry.clear()
