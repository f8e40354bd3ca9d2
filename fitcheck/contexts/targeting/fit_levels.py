"""
Three-tier vocabularies shared by every scoring output.

FitLevel is used for two different signals that share the same thresholds:
- fit level: how well the resume matches the target (from the overall score)
- confidence: how complete the resume data is (from the accuracy metric)

The two are thresholded independently and should not be merged even though
they use the same High/Medium/Low words.
"""

from enum import Enum

HIGH_THRESHOLD = 80
MEDIUM_THRESHOLD = 60


class FitLevel(Enum):
    """Low / Medium / High tier for a 0-100 score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_score(cls, score: float) -> "FitLevel":
        """
        Classify a 0-100 score.

        Returns:
            HIGH for score >= 80, MEDIUM for score >= 60, otherwise LOW
        """
        if score >= HIGH_THRESHOLD:
            return cls.HIGH
        if score >= MEDIUM_THRESHOLD:
            return cls.MEDIUM
        return cls.LOW


class Severity(Enum):
    """Priority of a gap category."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def escalate(self, other: "Severity") -> "Severity":
        """Return the higher of the two severities (severity never goes down)."""
        return other if other.rank > self.rank else self


_SEVERITY_RANK = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}
