"""Custom exceptions for the intake context with references to the offending profile."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownTargetError(KeyError):
    """
    Exception raised when a role key or job profile id is not in the profile tables.

    Attributes:
        message: Error description
        identifier: The identifier that failed to resolve
        target_kind: "role" or "job profile"
        available: Identifiers that do exist for this kind of target
    """

    def __init__(
        self,
        identifier: str,
        target_kind: str = "target",
        available: Optional[Iterable[str]] = None,
    ):
        self.identifier = identifier
        self.target_kind = target_kind
        self.available = sorted(available) if available is not None else []

        parts = [f"Unknown {target_kind}: '{identifier}'"]
        if self.available:
            parts.append(f"Available: {', '.join(self.available)}")

        self.message = ". ".join(parts)
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError quotes its argument by default
        return self.message


class InvalidProfileError(ValueError):
    """
    Exception raised when a role or job profile definition is malformed.

    Raised for profiles without requirements, weights outside their allowed range,
    unknown categories, empty keyword sets, or role weights that do not sum to 100.

    Attributes:
        message: Error description
        profile_id: Identifier of the malformed profile (if known)
        source_path: Profile table the definition was loaded from (if any)
    """

    def __init__(
        self,
        message: str,
        profile_id: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.profile_id = profile_id
        self.source_path = source_path

        parts = [message]

        if profile_id:
            parts.append(f"Profile: {profile_id}")

        if source_path:
            parts.append(f"Defined in: {source_path}")

        super().__init__("\n".join(parts))
