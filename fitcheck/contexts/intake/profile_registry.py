"""
Profile registry for role-weighted and requirement-weighted scoring targets.

Loads the role table and the job profile table from YAML files at startup and
resolves identifiers to RoleProfile / JobProfile instances. The tables are
data, not code: point FITCHECK_ROLE_PROFILES or FITCHECK_JOB_PROFILES at
another YAML file to change the targets without touching the engine.

Table format (both files): a mapping from identifier to definition.

    frontend-developer:          # roles.yaml
      title: Frontend Developer
      keywords: {skills: [...], experience: [...], tools: [...]}
      weights: {skills: 40, experience: 35, education: 15, projects: 10}

    frontend-dev:                # job_profiles.yaml
      title: Frontend Developer
      company: Tech Corp
      requirements: [{id, title, category, required, keywords, weight}, ...]
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from fitcheck.contexts.intake.exceptions import InvalidProfileError, UnknownTargetError
from fitcheck.contexts.intake.job_data_structure import JobProfile, RoleProfile
from fitcheck.contexts.intake.logger import log_profiles_loaded

load_dotenv()

PROFILES_DIR = Path(__file__).parent / "profiles"
ROLE_PROFILES_PATH = Path(os.getenv("FITCHECK_ROLE_PROFILES", PROFILES_DIR / "roles.yaml"))
JOB_PROFILES_PATH = Path(os.getenv("FITCHECK_JOB_PROFILES", PROFILES_DIR / "job_profiles.yaml"))


def _load_table(path: Path) -> Dict[str, Any]:
    """Load a YAML profile table as a plain dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile table not found: {path}")

    table = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise InvalidProfileError("Profile table must be a mapping of id -> definition", source_path=path)
    return table


def load_role_profiles(path: Optional[Path] = None) -> Dict[str, RoleProfile]:
    """
    Load role profiles from a YAML table.

    Args:
        path: Optional path to the role table (defaults to ROLE_PROFILES_PATH)

    Returns:
        Dict mapping role key to RoleProfile, in file order

    Raises:
        InvalidProfileError: If any role definition is malformed
    """
    path = Path(path) if path is not None else ROLE_PROFILES_PATH
    roles = {}
    for key, definition in _load_table(path).items():
        try:
            roles[str(key)] = RoleProfile.from_dict(definition or {}, role_key=str(key))
        except InvalidProfileError as e:
            raise InvalidProfileError(e.message, profile_id=str(key), source_path=path) from e

    log_profiles_loaded("roles", len(roles), path)
    return roles


def load_job_profiles(path: Optional[Path] = None) -> Dict[str, JobProfile]:
    """
    Load job profiles from a YAML table.

    Args:
        path: Optional path to the job profile table (defaults to JOB_PROFILES_PATH)

    Returns:
        Dict mapping profile id to JobProfile, in file order

    Raises:
        InvalidProfileError: If any profile or requirement is malformed
    """
    path = Path(path) if path is not None else JOB_PROFILES_PATH
    profiles = {}
    for profile_id, definition in _load_table(path).items():
        try:
            profiles[str(profile_id)] = JobProfile.from_dict(
                definition or {}, profile_id=str(profile_id)
            )
        except InvalidProfileError as e:
            raise InvalidProfileError(e.message, profile_id=str(profile_id), source_path=path) from e

    log_profiles_loaded("job profiles", len(profiles), path)
    return profiles


class ProfileRegistry:
    """
    Identifier -> target lookup for roles and job profiles.

    Attributes:
        roles: Role key -> RoleProfile
        job_profiles: Profile id -> JobProfile
    """

    def __init__(
        self,
        roles: Optional[Dict[str, RoleProfile]] = None,
        job_profiles: Optional[Dict[str, JobProfile]] = None,
    ):
        self.roles = dict(roles or {})
        self.job_profiles = dict(job_profiles or {})

    @classmethod
    def from_files(
        cls, roles_path: Optional[Path] = None, job_profiles_path: Optional[Path] = None
    ) -> "ProfileRegistry":
        """Load both tables (defaults come from the environment)."""
        return cls(
            roles=load_role_profiles(roles_path),
            job_profiles=load_job_profiles(job_profiles_path),
        )

    def get_role(self, role_key: str) -> RoleProfile:
        """
        Resolve a role key.

        Raises:
            UnknownTargetError: If the role key is not defined
        """
        if role_key not in self.roles:
            raise UnknownTargetError(role_key, target_kind="role", available=self.roles.keys())
        return self.roles[role_key]

    def get_job_profile(self, profile_id: str) -> JobProfile:
        """
        Resolve a job profile id.

        Raises:
            UnknownTargetError: If the profile id is not defined
        """
        if profile_id not in self.job_profiles:
            raise UnknownTargetError(
                profile_id, target_kind="job profile", available=self.job_profiles.keys()
            )
        return self.job_profiles[profile_id]

    def list_roles(self) -> List[RoleProfile]:
        return list(self.roles.values())

    def list_job_profiles(self) -> List[JobProfile]:
        return list(self.job_profiles.values())


def load_default_registry() -> ProfileRegistry:
    """Load the registry from ROLE_PROFILES_PATH and JOB_PROFILES_PATH."""
    return ProfileRegistry.from_files()
