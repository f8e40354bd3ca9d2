"""
Targeting Context

Responsibilities:
- Flattens a resume into a lowercase search corpus
- Matches target keywords against the corpus (case-insensitive substring search)
- Scores the resume against a role (weighted categories) or a job profile (weighted requirements)
- Groups unmet requirements into categorized gaps with severity and suggestions
- Rates resume completeness independently of job fit
- Assembles everything into an immutable ScoreResult

Owns: Matching, scoring, gap analysis, completeness, result assembly, debounced scheduling
Never: Loads profile tables or persists results (callers do)
"""

from fitcheck.contexts.targeting.completeness import completeness_checks, estimate_accuracy
from fitcheck.contexts.targeting.exceptions import TargetModeMismatchError
from fitcheck.contexts.targeting.fit_levels import FitLevel, Severity
from fitcheck.contexts.targeting.gap_analyzer import GapEntry, analyze_gaps, improvement_feedback
from fitcheck.contexts.targeting.keyword_matcher import matches, matches_any
from fitcheck.contexts.targeting.result import (
    ScoreResult,
    displayed_matched_keywords,
    displayed_missing_keywords,
)
from fitcheck.contexts.targeting.scheduler import DebouncedScorer
from fitcheck.contexts.targeting.scoring import ScoringEngine, ScoringMode, compute_score
from fitcheck.contexts.targeting.text_extractor import extract_resume_text

__all__ = [
    # Entry point
    "compute_score",
    "ScoringEngine",
    "ScoringMode",
    "DebouncedScorer",
    # Building blocks
    "extract_resume_text",
    "matches",
    "matches_any",
    "analyze_gaps",
    "improvement_feedback",
    "completeness_checks",
    "estimate_accuracy",
    # Results
    "ScoreResult",
    "GapEntry",
    "FitLevel",
    "Severity",
    "displayed_matched_keywords",
    "displayed_missing_keywords",
    # Errors
    "TargetModeMismatchError",
]
