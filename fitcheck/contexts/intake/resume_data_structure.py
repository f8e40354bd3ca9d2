"""
Resume Data Structure

Defines the structured resume consumed by the Targeting context.

Intake owns:
- Building Resume instances from plain dicts (camelCase or snake_case keys)
- Loading Resume instances from YAML or JSON files

Targeting treats a Resume as immutable input. Missing or null fields are
normalized to empty strings and empty tuples here, so nothing downstream
has to special-case them.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from omegaconf import OmegaConf


def _text(value: Any) -> str:
    """Normalize an optional scalar field to a string ("" for None)."""
    if value is None:
        return ""
    return str(value)


def _texts(values: Any) -> Tuple[str, ...]:
    """Normalize an optional list of strings, dropping null entries."""
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values if v is not None)


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data (supports camelCase and snake_case aliases)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class ResumeProfile:
    """
    Contact and summary block at the top of a resume.

    Attributes:
        name: Full name
        email: Email address
        summary: Professional summary / objective
        location: City, state or region
        phone: Phone number (not searched)
        url: Personal site or profile link (not searched)
    """

    name: str = ""
    email: str = ""
    summary: str = ""
    location: str = ""
    phone: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ResumeProfile":
        data = data or {}
        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            summary=_text(data.get("summary")),
            location=_text(data.get("location")),
            phone=_text(data.get("phone")),
            url=_text(data.get("url")),
        )


@dataclass(frozen=True)
class WorkExperience:
    """Single work experience entry (company, title, bullet descriptions)."""

    company: str = ""
    job_title: str = ""
    date: str = ""
    descriptions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkExperience":
        return cls(
            company=_text(data.get("company")),
            job_title=_text(_get(data, "job_title", "jobTitle", "title")),
            date=_text(data.get("date")),
            descriptions=_texts(data.get("descriptions")),
        )


@dataclass(frozen=True)
class Education:
    """Single education entry (school, degree, bullet descriptions)."""

    school: str = ""
    degree: str = ""
    date: str = ""
    gpa: str = ""
    descriptions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            school=_text(data.get("school")),
            degree=_text(data.get("degree")),
            date=_text(data.get("date")),
            gpa=_text(data.get("gpa")),
            descriptions=_texts(data.get("descriptions")),
        )


@dataclass(frozen=True)
class Project:
    """Single project entry. `project` holds the project name."""

    project: str = ""
    date: str = ""
    descriptions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            project=_text(_get(data, "project", "name")),
            date=_text(data.get("date")),
            descriptions=_texts(data.get("descriptions")),
        )


@dataclass(frozen=True)
class FeaturedSkill:
    """Highlighted skill with a self-assessed rating."""

    skill: str = ""
    rating: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "FeaturedSkill":
        if isinstance(data, str):
            return cls(skill=data)
        data = data or {}
        rating = _get(data, "rating", "level", default=0)
        return cls(skill=_text(data.get("skill")), rating=int(rating or 0))


@dataclass(frozen=True)
class Skills:
    """
    Skills section.

    Attributes:
        descriptions: Free-form skill lines (e.g., "Python, SQL, Docker")
        featured_skills: Highlighted skills with ratings
    """

    descriptions: Tuple[str, ...] = ()
    featured_skills: Tuple[FeaturedSkill, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Skills":
        data = data or {}
        featured = _get(data, "featured_skills", "featuredSkills", default=None) or []
        return cls(
            descriptions=_texts(data.get("descriptions")),
            featured_skills=tuple(FeaturedSkill.from_dict(item) for item in featured),
        )


@dataclass(frozen=True)
class Resume:
    """
    Structured resume: profile, ordered entries per section, and skills.

    Factory methods:
        from_dict(data) - Build from a plain dict (camelCase or snake_case keys)
        from_file(path) - Load from a YAML or JSON file
    """

    profile: ResumeProfile = field(default_factory=ResumeProfile)
    work_experiences: Tuple[WorkExperience, ...] = ()
    educations: Tuple[Education, ...] = ()
    projects: Tuple[Project, ...] = ()
    skills: Skills = field(default_factory=Skills)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Resume":
        """
        Build a Resume from a plain dict.

        Accepts both the camelCase keys used by browser-side resume builders
        (workExperiences, jobTitle, featuredSkills) and snake_case keys.
        Missing sections become empty.

        Args:
            data: Resume data (may be None or partial)

        Returns:
            Resume instance
        """
        data = data or {}
        work = _get(data, "work_experiences", "workExperiences", default=None) or []
        educations = data.get("educations") or []
        projects = data.get("projects") or []

        return cls(
            profile=ResumeProfile.from_dict(data.get("profile")),
            work_experiences=tuple(WorkExperience.from_dict(item) for item in work),
            educations=tuple(Education.from_dict(item) for item in educations),
            projects=tuple(Project.from_dict(item) for item in projects),
            skills=Skills.from_dict(data.get("skills")),
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "Resume":
        """
        Load a Resume from a YAML or JSON file.

        Args:
            file_path: Path to the resume file

        Returns:
            Resume instance

        Raises:
            FileNotFoundError: If file_path does not exist
            ValueError: If the file does not contain a mapping at the top level
        """
        file_path = Path(file_path)  # Ensure Path object
        if not file_path.exists():
            raise FileNotFoundError(f"Resume file not found: {file_path}")

        # JSON is a subset of YAML, so OmegaConf reads both.
        # Resume text is free-form: "${...}" stays literal, never an interpolation.
        data = OmegaConf.to_container(OmegaConf.load(file_path), resolve=False)
        if not isinstance(data, dict):
            raise ValueError(f"Invalid resume structure: expected a mapping in {file_path}")

        # Allow a top-level "resume" wrapper
        if "resume" in data and isinstance(data["resume"], dict):
            data = data["resume"]

        return cls.from_dict(data)

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def has_name(self) -> bool:
        """Whether the resume has been parsed far enough to carry a name."""
        return bool(self.profile.name.strip())
