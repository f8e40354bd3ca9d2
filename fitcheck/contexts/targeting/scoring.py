"""
Scoring Engine

Scores a resume against a target in one of two modes:

- Role-weighted: fixed categories with weights summing to 100. Keyword
  categories score matched / total * 100; education and projects are scored
  by heuristics. overall = round(sum(score * weight) / 100).
- Requirement-weighted: each requirement carries a 1-10 weight.
  overall = round(matched weight / total weight * 100). Unmatched requirements
  feed the gap analyzer and the improvement feedback.

Both modes share the text extractor and keyword matcher, and both report
completeness ("accuracy") and the two three-tier signals (fit level from the
overall score, confidence from accuracy).

Usage:
    from fitcheck.contexts.targeting.scoring import compute_score

    result = compute_score(resume, registry.get_role("frontend-developer"))
    result = compute_score(resume, registry.get_job_profile("frontend-dev"))
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from fitcheck.contexts.intake.job_data_structure import (
    EDUCATION_CATEGORY,
    PROJECTS_CATEGORY,
    JobProfile,
    RoleProfile,
)
from fitcheck.contexts.intake.resume_data_structure import Resume
from fitcheck.contexts.targeting.completeness import estimate_accuracy
from fitcheck.contexts.targeting.exceptions import TargetModeMismatchError
from fitcheck.contexts.targeting.gap_analyzer import analyze_gaps, improvement_feedback
from fitcheck.contexts.targeting.keyword_matcher import (
    MatchOutcome,
    match_requirement,
    partition_keywords,
)
from fitcheck.contexts.targeting.logger import log_scoring_result, log_scoring_start
from fitcheck.contexts.targeting.result import (
    ScoreResult,
    assemble_requirement_result,
    assemble_role_result,
)
from fitcheck.contexts.targeting.text_extractor import extract_resume_text
from fitcheck.utils.numeric import percentage, round_half_up

Target = Union[RoleProfile, JobProfile]

# Education heuristic: degree text mentioning any of these counts as relevant
RELEVANT_DEGREE_TERMS = ("computer", "engineering", "science", "technology")
RELEVANT_DEGREE_SCORE = 80
OTHER_DEGREE_SCORE = 40

# Projects heuristic
POINTS_PER_PROJECT = 30
NO_PROJECTS_SCORE = 20


class ScoringMode(Enum):
    """Which weighting scheme the engine applies."""

    ROLE_WEIGHTED = "role"
    REQUIREMENT_WEIGHTED = "requirement"

    @classmethod
    def for_target(cls, target: Target) -> "ScoringMode":
        if isinstance(target, RoleProfile):
            return cls.ROLE_WEIGHTED
        if isinstance(target, JobProfile):
            return cls.REQUIREMENT_WEIGHTED
        raise TypeError(
            f"Scoring target must be a RoleProfile or JobProfile, got {type(target).__name__}"
        )


@dataclass(frozen=True)
class CategoryScore:
    """Unrounded score of one role category with the keywords behind it."""

    category: str
    score: float
    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()


def education_score(resume: Resume) -> float:
    """80 if any degree mentions a technical field, otherwise 40."""
    relevant = any(
        term in edu.degree.lower() for edu in resume.educations for term in RELEVANT_DEGREE_TERMS
    )
    return RELEVANT_DEGREE_SCORE if relevant else OTHER_DEGREE_SCORE


def projects_score(resume: Resume) -> float:
    """30 points per project capped at 100, or 20 when there are none."""
    count = len(resume.projects)
    if count == 0:
        return NO_PROJECTS_SCORE
    return min(count * POINTS_PER_PROJECT, 100)


def score_role_categories(resume: Resume, role: RoleProfile, corpus: str) -> List[CategoryScore]:
    """
    Score every role category.

    Keyword categories come first in definition order (their keywords drive
    the matched / missing lists), followed by the education and projects
    heuristics when the role weights them.
    """
    scores = []
    for category, keywords in role.keywords.items():
        matched, missing = partition_keywords(corpus, keywords)
        scores.append(
            CategoryScore(
                category=category,
                score=percentage(len(matched), len(keywords)),
                matched=tuple(matched),
                missing=tuple(missing),
            )
        )

    if EDUCATION_CATEGORY in role.weights and EDUCATION_CATEGORY not in role.keywords:
        scores.append(CategoryScore(EDUCATION_CATEGORY, education_score(resume)))
    if PROJECTS_CATEGORY in role.weights and PROJECTS_CATEGORY not in role.keywords:
        scores.append(CategoryScore(PROJECTS_CATEGORY, projects_score(resume)))

    return scores


def weighted_overall(category_scores: Dict[str, float], weights: Dict[str, int]) -> int:
    """round(sum(score * weight) / 100), clamped to [0, 100]."""
    total = sum(category_scores.get(category, 0.0) * weight for category, weight in weights.items())
    return max(0, min(100, round_half_up(total / 100)))


class ScoringEngine:
    """
    Resume scorer with a mode switch.

    Attributes:
        mode: Fixed scoring mode, or None to pick the mode from each target's type
    """

    def __init__(self, mode: Optional[ScoringMode] = None):
        self.mode = mode

    def score(self, resume: Resume, target: Target) -> ScoreResult:
        """
        Score a resume against a role or job profile.

        Args:
            resume: Resume to score
            target: RoleProfile (role-weighted) or JobProfile (requirement-weighted)

        Returns:
            Immutable ScoreResult

        Raises:
            TargetModeMismatchError: If the engine has a fixed mode that does not
                match the target type
            TypeError: If target is neither a RoleProfile nor a JobProfile
        """
        target_mode = ScoringMode.for_target(target)
        if self.mode is not None and self.mode is not target_mode:
            raise TargetModeMismatchError(self.mode, target)

        if target_mode is ScoringMode.ROLE_WEIGHTED:
            result = self.score_role(resume, target)
        else:
            result = self.score_requirements(resume, target)

        log_scoring_result(result)
        return result

    def score_role(self, resume: Resume, role: RoleProfile) -> ScoreResult:
        """Role-weighted scoring (see module docstring)."""
        corpus = extract_resume_text(resume)
        log_scoring_start(ScoringMode.ROLE_WEIGHTED.value, role.key, len(corpus))

        category_scores = score_role_categories(resume, role, corpus)
        scores = {cs.category: cs.score for cs in category_scores}

        matched_keywords = [k for cs in category_scores for k in cs.matched]
        missing_keywords = [k for cs in category_scores for k in cs.missing]

        return assemble_role_result(
            role_key=role.key,
            role_title=role.title,
            overall=weighted_overall(scores, role.weights),
            breakdown={c: round_half_up(scores.get(c, 0.0)) for c in role.weights},
            matched_keywords=matched_keywords,
            missing_keywords=missing_keywords,
            accuracy=estimate_accuracy(resume),
        )

    def score_requirements(self, resume: Resume, profile: JobProfile) -> ScoreResult:
        """Requirement-weighted scoring (see module docstring)."""
        corpus = extract_resume_text(resume)
        log_scoring_start(ScoringMode.REQUIREMENT_WEIGHTED.value, profile.id, len(corpus))

        outcomes = [match_requirement(corpus, r) for r in profile.requirements]
        matched = [o for o in outcomes if o.matched]
        unmatched = [o.requirement for o in outcomes if not o.matched]

        matched_weight = sum(o.requirement.weight for o in matched)
        overall = round_half_up(percentage(matched_weight, profile.total_weight))

        return assemble_requirement_result(
            profile_id=profile.id,
            profile_title=profile.title,
            overall=max(0, min(100, overall)),
            breakdown=requirement_breakdown(outcomes),
            matched_keywords=[k for o in matched for k in o.matched_keywords],
            missing_keywords=[k for r in unmatched for k in r.keywords],
            gaps=analyze_gaps(unmatched),
            strengths=[o.requirement.title for o in matched],
            feedback=improvement_feedback(unmatched),
            accuracy=estimate_accuracy(resume),
        )


def requirement_breakdown(outcomes: List[MatchOutcome]) -> Dict[str, int]:
    """Weighted match percentage per requirement category, in first-seen order."""
    matched: Dict[str, int] = {}
    total: Dict[str, int] = {}
    for outcome in outcomes:
        category = outcome.requirement.category.value
        total[category] = total.get(category, 0) + outcome.requirement.weight
        matched.setdefault(category, 0)
        if outcome.matched:
            matched[category] += outcome.requirement.weight

    return {c: round_half_up(percentage(matched[c], total[c])) for c in total}


_DEFAULT_ENGINE = ScoringEngine()


def compute_score(resume: Resume, target: Target) -> ScoreResult:
    """
    Score a resume against a target; the mode follows the target's type.

    This is the single entry point for callers.
    """
    return _DEFAULT_ENGINE.score(resume, target)
