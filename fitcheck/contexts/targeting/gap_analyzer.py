"""
Gap analysis for unmet job requirements.

Groups unmatched requirements by category into GapEntry records and produces
one improvement hint per unmatched requirement.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from fitcheck.contexts.intake.job_data_structure import Requirement
from fitcheck.contexts.targeting.fit_levels import Severity

# Static remediation hints attached once per gap category
GAP_SUGGESTIONS: Dict[str, Tuple[str, ...]] = {
    "skills": (
        "Add this skill to your Featured Skills section",
        "Mention projects where you used this technology",
        "Include relevant coursework or certifications",
    ),
    "experience": (
        "Highlight relevant work experience",
        "Include internships or freelance projects",
        "Mention volunteer work in this area",
    ),
    "education": (
        "Add relevant degree or certification",
        "Include online courses or bootcamps",
        "Mention self-study projects",
    ),
    "certification": (
        "Obtain industry-recognized certification",
        "Include completion certificates from online courses",
        "Add professional development activities",
    ),
    "project": (
        "Create a project demonstrating this skill",
        "Contribute to open source projects",
        "Build a portfolio showcasing your work",
    ),
    "default": ("Consider adding this to your resume",),
}

REQUIRED_FEEDBACK = "Add {title} to your {category} section - this is a required skill."
OPTIONAL_FEEDBACK = "Consider adding {title} to strengthen your profile for this role."


@dataclass(frozen=True)
class GapEntry:
    """
    Unmet requirements in one category.

    Attributes:
        category: Requirement category value (e.g., "skills")
        missing: Titles of unmatched requirements, in requirement order
        suggestions: Generic remediation hints for the category
        severity: HIGH if any missing requirement is required, else MEDIUM
    """

    category: str
    missing: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "missing": list(self.missing),
            "suggestions": list(self.suggestions),
            "severity": self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GapEntry":
        return cls(
            category=data["category"],
            missing=tuple(data.get("missing", [])),
            suggestions=tuple(data.get("suggestions", [])),
            severity=Severity(data.get("severity", Severity.MEDIUM.value)),
        )


def suggestions_for(category: str) -> Tuple[str, ...]:
    """Remediation hints for a category (falls back to the default hint)."""
    return GAP_SUGGESTIONS.get(category, GAP_SUGGESTIONS["default"])


def analyze_gaps(unmatched: Iterable[Requirement]) -> List[GapEntry]:
    """
    Group unmatched requirements into per-category gaps.

    Categories appear in order of their first unmatched requirement. A new
    gap starts at HIGH if its first requirement is required, otherwise MEDIUM.
    Any later required miss escalates the gap to HIGH; optional misses never
    lower it.

    Args:
        unmatched: Requirements whose keywords were not found, in profile order

    Returns:
        List of GapEntry, one per category with at least one miss
    """
    missing: Dict[str, List[str]] = {}
    severity: Dict[str, Severity] = {}

    for requirement in unmatched:
        category = requirement.category.value
        if category not in missing:
            missing[category] = []
            severity[category] = Severity.HIGH if requirement.required else Severity.MEDIUM
        elif requirement.required:
            severity[category] = severity[category].escalate(Severity.HIGH)
        missing[category].append(requirement.title)

    return [
        GapEntry(
            category=category,
            missing=tuple(titles),
            suggestions=suggestions_for(category),
            severity=severity[category],
        )
        for category, titles in missing.items()
    ]


def improvement_feedback(unmatched: Iterable[Requirement]) -> List[str]:
    """One hint per unmatched requirement, in requirement order (not grouped)."""
    feedback = []
    for requirement in unmatched:
        template = REQUIRED_FEEDBACK if requirement.required else OPTIONAL_FEEDBACK
        feedback.append(
            template.format(title=requirement.title, category=requirement.category.value)
        )
    return feedback
