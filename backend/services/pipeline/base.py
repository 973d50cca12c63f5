"""Abstract base class for all audit lenses."""

from abc import ABC, abstractmethod
import logging

from models.responses import LensResult, Profile, Status

logger = logging.getLogger(__name__)


class BaseLens(ABC):
    """Base class for one independent scoring dimension.

    Subclasses must implement:
        - name: identifier used in lens_registry and AuditResult.lenses
        - analyze(text, profile): score the text and return a LensResult

    The overall status of a lens is always derived from its score through
    the pass/warn thresholds declared on the subclass.
    """

    name: str = ""
    title: str = ""
    subtitle: str = ""
    pass_threshold: int = 75
    warn_threshold: int = 50

    @abstractmethod
    def analyze(self, text: str, profile: Profile) -> LensResult:
        """Run the lens over resume text. Never raises for string input."""

    def status_for(self, score: int) -> Status:
        if score >= self.pass_threshold:
            return "pass"
        if score >= self.warn_threshold:
            return "warn"
        return "fail"

    def __call__(self, text: str, profile: Profile) -> LensResult:
        result = self.analyze(text, profile)
        logger.debug("Lens %s scored %d (%s)", self.name, result.score, result.status)
        return result
