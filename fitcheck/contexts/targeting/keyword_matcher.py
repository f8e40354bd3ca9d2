"""
Keyword presence matching.

Matching is plain case-insensitive substring containment on the corpus built by
text_extractor. There is no tokenization and no word-boundary check, so short
keywords also match inside longer words: "java" matches "javascript" and "r"
matches almost anything. These false positives are part of the scoring
contract; do not add word boundaries here.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from fitcheck.contexts.intake.job_data_structure import Requirement


@dataclass(frozen=True)
class MatchOutcome:
    """
    Match result for a single requirement (derived, never persisted).

    Attributes:
        requirement: The requirement that was checked
        matched: True if any of its keywords is in the corpus
        matched_keywords: Keywords found, in requirement order
    """

    requirement: Requirement
    matched: bool
    matched_keywords: Tuple[str, ...] = ()


def matches(corpus: str, keyword: str) -> bool:
    """
    Check whether a keyword occurs in the corpus.

    Args:
        corpus: Lowercase resume corpus (from extract_resume_text)
        keyword: Keyword or phrase in any case

    Returns:
        True if keyword.lower() is a substring of corpus
    """
    return keyword.lower() in corpus


def matches_any(corpus: str, keywords: Iterable[str]) -> bool:
    """True if at least one keyword occurs in the corpus."""
    return any(matches(corpus, keyword) for keyword in keywords)


def partition_keywords(corpus: str, keywords: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Split keywords into (matched, missing), each in input order.

    Args:
        corpus: Lowercase resume corpus
        keywords: Keywords to check

    Returns:
        Tuple of (matched keywords, missing keywords)
    """
    matched, missing = [], []
    for keyword in keywords:
        if matches(corpus, keyword):
            matched.append(keyword)
        else:
            missing.append(keyword)
    return matched, missing


def match_requirement(corpus: str, requirement: Requirement) -> MatchOutcome:
    """Evaluate one requirement: matched if ANY of its keywords is present."""
    found, _ = partition_keywords(corpus, requirement.keywords)
    return MatchOutcome(
        requirement=requirement,
        matched=bool(found),
        matched_keywords=tuple(found),
    )
