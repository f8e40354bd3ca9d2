"""
Intake Context

Responsibilities:
- Builds structured Resume instances from plain data (dicts, YAML, JSON)
- Defines target profiles: role-weighted configs and requirement-based job profiles
- Loads and validates the profile tables that map identifiers to targets

Owns: Resume data model, target profile data model, profile tables
Never: Scores resumes or makes matching decisions
"""

from fitcheck.contexts.intake.exceptions import (
    InvalidProfileError,
    UnknownTargetError,
)
from fitcheck.contexts.intake.job_data_structure import (
    JobProfile,
    Requirement,
    RequirementCategory,
    RoleProfile,
)
from fitcheck.contexts.intake.profile_registry import ProfileRegistry, load_default_registry
from fitcheck.contexts.intake.resume_data_structure import (
    Education,
    FeaturedSkill,
    Project,
    Resume,
    ResumeProfile,
    Skills,
    WorkExperience,
)

__all__ = [
    # Resume data model
    "Resume",
    "ResumeProfile",
    "WorkExperience",
    "Education",
    "Project",
    "Skills",
    "FeaturedSkill",
    # Target profiles
    "Requirement",
    "RequirementCategory",
    "JobProfile",
    "RoleProfile",
    "ProfileRegistry",
    "load_default_registry",
    # Errors
    "InvalidProfileError",
    "UnknownTargetError",
]
