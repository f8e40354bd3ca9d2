"""
Target profile data structures for the Intake context.

Two kinds of target exist:

- RoleProfile: a generic role (e.g., "frontend-developer") described by keyword
  lists per category and fixed category weights that sum to 100.
- JobProfile: a concrete posting described by an ordered list of Requirements,
  each with its own keywords, category, required flag, and 1-10 weight.

Both are read-only once built. Validation happens at construction time so a
malformed profile fails fast instead of silently producing a zero score.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from fitcheck.contexts.intake.exceptions import InvalidProfileError

MIN_REQUIREMENT_WEIGHT = 1
MAX_REQUIREMENT_WEIGHT = 10
ROLE_WEIGHT_TOTAL = 100

# Role categories scored by heuristics rather than keyword lists
EDUCATION_CATEGORY = "education"
PROJECTS_CATEGORY = "projects"
HEURISTIC_CATEGORIES = (EDUCATION_CATEGORY, PROJECTS_CATEGORY)


class RequirementCategory(Enum):
    """Resume area a job requirement belongs to."""

    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CERTIFICATION = "certification"
    PROJECT = "project"


def _keyword_tuple(keywords: Any, profile_id: str, owner: str) -> Tuple[str, ...]:
    """Validate and normalize a keyword list (non-empty strings, order preserved)."""
    if isinstance(keywords, str):
        keywords = [keywords]
    keywords = tuple(str(k) for k in (keywords or []))
    if any(not k.strip() for k in keywords):
        raise InvalidProfileError(f"{owner} has an empty keyword", profile_id=profile_id)
    return keywords


@dataclass(frozen=True)
class Requirement:
    """
    Single job requirement.

    Attributes:
        id: Requirement identifier (unique within its profile)
        title: Display title (e.g., "React.js")
        category: Resume area the requirement belongs to
        required: Whether the requirement is mandatory
        keywords: Match terms; the requirement is met if any one is found
        weight: Importance on a 1-10 scale
    """

    id: str
    title: str
    category: RequirementCategory
    required: bool = False
    keywords: Tuple[str, ...] = ()
    weight: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any], profile_id: Optional[str] = None) -> "Requirement":
        """
        Build a Requirement from a plain dict, validating every field.

        Raises:
            InvalidProfileError: On missing id/title, unknown category, empty keywords,
                or a weight outside 1-10
        """
        req_id = data.get("id")
        title = data.get("title")
        if not req_id or not title:
            raise InvalidProfileError(
                f"Requirement is missing 'id' or 'title': {data}", profile_id=profile_id
            )

        try:
            category = RequirementCategory(data.get("category"))
        except ValueError:
            valid = ", ".join(c.value for c in RequirementCategory)
            raise InvalidProfileError(
                f"Requirement '{req_id}' has unknown category '{data.get('category')}'. "
                f"Valid categories: {valid}",
                profile_id=profile_id,
            )

        keywords = _keyword_tuple(data.get("keywords"), profile_id, f"Requirement '{req_id}'")
        if not keywords:
            raise InvalidProfileError(
                f"Requirement '{req_id}' has no keywords", profile_id=profile_id
            )

        weight = data.get("weight")
        if (
            isinstance(weight, bool)
            or not isinstance(weight, int)
            or not MIN_REQUIREMENT_WEIGHT <= weight <= MAX_REQUIREMENT_WEIGHT
        ):
            raise InvalidProfileError(
                f"Requirement '{req_id}' weight must be an integer "
                f"{MIN_REQUIREMENT_WEIGHT}-{MAX_REQUIREMENT_WEIGHT}, got {weight!r}",
                profile_id=profile_id,
            )

        return cls(
            id=str(req_id),
            title=str(title),
            category=category,
            required=bool(data.get("required", False)),
            keywords=keywords,
            weight=weight,
        )


@dataclass(frozen=True)
class JobProfile:
    """
    Concrete job posting scored in requirement-weighted mode.

    Attributes:
        id: Profile identifier (e.g., "frontend-dev")
        title: Job title
        company: Hiring company
        requirements: Ordered requirements (order drives gap and feedback order)
    """

    id: str
    title: str
    company: str = ""
    requirements: Tuple[Requirement, ...] = ()

    def __post_init__(self):
        if not self.requirements:
            raise InvalidProfileError("Job profile has no requirements", profile_id=self.id)

    @property
    def total_weight(self) -> int:
        return sum(r.weight for r in self.requirements)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], profile_id: Optional[str] = None) -> "JobProfile":
        """
        Build a JobProfile from a plain dict.

        Args:
            data: Profile definition with title, company, requirements
            profile_id: Identifier to use when data has no "id" key (table key)

        Raises:
            InvalidProfileError: If the profile or any requirement is malformed
        """
        profile_id = str(data.get("id") or profile_id or "")
        if not profile_id:
            raise InvalidProfileError(f"Job profile is missing 'id': {data}")

        requirements = tuple(
            Requirement.from_dict(item, profile_id=profile_id)
            for item in (data.get("requirements") or [])
        )

        ids = [r.id for r in requirements]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise InvalidProfileError(
                f"Duplicate requirement ids: {', '.join(duplicates)}", profile_id=profile_id
            )

        return cls(
            id=profile_id,
            title=str(data.get("title") or profile_id),
            company=str(data.get("company") or ""),
            requirements=requirements,
        )


@dataclass(frozen=True)
class RoleProfile:
    """
    Generic role scored in role-weighted mode.

    Attributes:
        key: Role identifier (e.g., "frontend-developer")
        title: Display title
        keywords: Keyword lists per category (e.g., skills, experience, tools)
        weights: Category weights summing to 100. Keys are keyword categories
            or the heuristic categories "education" and "projects". Keyword
            categories without a weight still report matched/missing keywords.
    """

    key: str
    title: str
    keywords: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    weights: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        if not self.weights:
            raise InvalidProfileError("Role has no category weights", profile_id=self.key)

        unknown = [
            c for c in self.weights if c not in self.keywords and c not in HEURISTIC_CATEGORIES
        ]
        if unknown:
            raise InvalidProfileError(
                f"Weights reference unknown categories: {', '.join(unknown)}",
                profile_id=self.key,
            )

        if any(isinstance(w, bool) or not isinstance(w, int) or w < 0 for w in self.weights.values()):
            raise InvalidProfileError(
                f"Role weights must be non-negative integers, got {self.weights}",
                profile_id=self.key,
            )

        total = sum(self.weights.values())
        if total != ROLE_WEIGHT_TOTAL:
            raise InvalidProfileError(
                f"Role weights must sum to {ROLE_WEIGHT_TOTAL}, got {total}",
                profile_id=self.key,
            )

    @property
    def keyword_categories(self) -> Tuple[str, ...]:
        """Keyword categories in definition order."""
        return tuple(self.keywords.keys())

    @classmethod
    def from_dict(cls, data: Dict[str, Any], role_key: Optional[str] = None) -> "RoleProfile":
        """
        Build a RoleProfile from a plain dict.

        Expected shape:
            title: Frontend Developer
            keywords:
              skills: [react, javascript, ...]
              experience: [frontend, ...]
              tools: [git, ...]
            weights: {skills: 40, experience: 35, education: 15, projects: 10}

        Raises:
            InvalidProfileError: If keywords or weights are malformed
        """
        key = str(data.get("key") or role_key or "")
        if not key:
            raise InvalidProfileError(f"Role is missing 'key': {data}")

        raw_keywords = data.get("keywords") or {}
        if not isinstance(raw_keywords, dict):
            raise InvalidProfileError("Role 'keywords' must be a mapping", profile_id=key)

        keywords = {
            str(category): _keyword_tuple(items, key, f"Keyword category '{category}'")
            for category, items in raw_keywords.items()
        }

        return cls(
            key=key,
            title=str(data.get("title") or key),
            keywords=keywords,
            weights=dict(data.get("weights") or {}),
        )
