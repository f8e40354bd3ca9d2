"""
Score result record and assembly.

A ScoreResult is created once per analysis and never modified. Callers may
serialize it with to_dict() and append it to the analysis history.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from fitcheck.contexts.targeting.fit_levels import FitLevel
from fitcheck.contexts.targeting.gap_analyzer import GapEntry
from fitcheck.utils.timestamp import now_exact

# Storage cap for missing keywords in role-weighted mode
MAX_STORED_MISSING_KEYWORDS = 10

# Display-layer limits
DISPLAY_MATCHED_LIMIT = 15
DISPLAY_MISSING_LIMIT = 10


def unique(items: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(items))


@dataclass(frozen=True)
class ScoreResult:
    """
    Outcome of scoring one resume against one target.

    Attributes:
        overall: Overall score, 0-100
        breakdown: Category -> 0-100 score
        accuracy: Resume completeness, 0-100 (independent of the target)
        confidence: Tier of accuracy (a data-completeness signal, not a fit signal)
        fit_level: Tier of overall (how well the resume fits the target)
        matched_keywords: Keywords found, unique, in first-seen order
        missing_keywords: Keywords not found, unique (capped at 10 in role mode)
        gaps: Categorized unmet requirements (requirement mode)
        strengths: Titles of matched requirements (requirement mode)
        improvement_feedback: One hint per unmatched requirement (requirement mode)
        matched_requirements: Titles of matched requirements (requirement mode)
        mode: "role" or "requirement"
        target_id: Role key or job profile id
        target_title: Role or job title
        timestamp: ISO 8601 creation time
    """

    overall: int
    breakdown: Dict[str, int]
    accuracy: int
    confidence: FitLevel
    fit_level: FitLevel
    matched_keywords: Tuple[str, ...] = ()
    missing_keywords: Tuple[str, ...] = ()
    gaps: Tuple[GapEntry, ...] = ()
    strengths: Tuple[str, ...] = ()
    improvement_feedback: Tuple[str, ...] = ()
    matched_requirements: Tuple[str, ...] = ()
    mode: str = ""
    target_id: str = ""
    target_title: str = ""
    timestamp: str = field(default_factory=now_exact)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe record of the result (enums as their string values)."""
        return {
            "overall": self.overall,
            "breakdown": dict(self.breakdown),
            "accuracy": self.accuracy,
            "confidence": self.confidence.value,
            "fit_level": self.fit_level.value,
            "matched_keywords": list(self.matched_keywords),
            "missing_keywords": list(self.missing_keywords),
            "gaps": [gap.to_dict() for gap in self.gaps],
            "strengths": list(self.strengths),
            "improvement_feedback": list(self.improvement_feedback),
            "matched_requirements": list(self.matched_requirements),
            "mode": self.mode,
            "target_id": self.target_id,
            "target_title": self.target_title,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreResult":
        """Rebuild a result from a to_dict() record (extra keys are ignored)."""
        return cls(
            overall=int(data["overall"]),
            breakdown=dict(data.get("breakdown", {})),
            accuracy=int(data.get("accuracy", 0)),
            confidence=FitLevel(data.get("confidence", FitLevel.LOW.value)),
            fit_level=FitLevel(data.get("fit_level", FitLevel.LOW.value)),
            matched_keywords=tuple(data.get("matched_keywords", [])),
            missing_keywords=tuple(data.get("missing_keywords", [])),
            gaps=tuple(GapEntry.from_dict(g) for g in data.get("gaps", [])),
            strengths=tuple(data.get("strengths", [])),
            improvement_feedback=tuple(data.get("improvement_feedback", [])),
            matched_requirements=tuple(data.get("matched_requirements", [])),
            mode=data.get("mode", ""),
            target_id=data.get("target_id", ""),
            target_title=data.get("target_title", ""),
            timestamp=data.get("timestamp", ""),
        )


def assemble_role_result(
    role_key: str,
    role_title: str,
    overall: int,
    breakdown: Dict[str, int],
    matched_keywords: Sequence[str],
    missing_keywords: Sequence[str],
    accuracy: int,
) -> ScoreResult:
    """
    Package a role-weighted score.

    Keywords are de-duplicated; missing keywords are additionally capped at
    MAX_STORED_MISSING_KEYWORDS. Role mode has no requirement-level gaps.
    """
    return ScoreResult(
        overall=overall,
        breakdown=dict(breakdown),
        accuracy=accuracy,
        confidence=FitLevel.from_score(accuracy),
        fit_level=FitLevel.from_score(overall),
        matched_keywords=tuple(unique(matched_keywords)),
        missing_keywords=tuple(unique(missing_keywords)[:MAX_STORED_MISSING_KEYWORDS]),
        mode="role",
        target_id=role_key,
        target_title=role_title,
    )


def assemble_requirement_result(
    profile_id: str,
    profile_title: str,
    overall: int,
    breakdown: Dict[str, int],
    matched_keywords: Sequence[str],
    missing_keywords: Sequence[str],
    gaps: Sequence[GapEntry],
    strengths: Sequence[str],
    feedback: Sequence[str],
    accuracy: int,
) -> ScoreResult:
    """Package a requirement-weighted score. Nothing is truncated in this mode."""
    return ScoreResult(
        overall=overall,
        breakdown=dict(breakdown),
        accuracy=accuracy,
        confidence=FitLevel.from_score(accuracy),
        fit_level=FitLevel.from_score(overall),
        matched_keywords=tuple(unique(matched_keywords)),
        missing_keywords=tuple(unique(missing_keywords)),
        gaps=tuple(gaps),
        strengths=tuple(strengths),
        improvement_feedback=tuple(feedback),
        matched_requirements=tuple(strengths),
        mode="requirement",
        target_id=profile_id,
        target_title=profile_title,
    )


def displayed_matched_keywords(
    result: ScoreResult, limit: int = DISPLAY_MATCHED_LIMIT
) -> Tuple[List[str], int]:
    """
    Matched keywords to show, plus how many were left out.

    Returns:
        Tuple of (first `limit` keywords, overflow count)
    """
    shown = list(result.matched_keywords[:limit])
    return shown, len(result.matched_keywords) - len(shown)


def displayed_missing_keywords(
    result: ScoreResult, limit: Optional[int] = DISPLAY_MISSING_LIMIT
) -> List[str]:
    """Missing keywords to show (first `limit`)."""
    return list(result.missing_keywords[:limit])
