"""Custom exceptions for the targeting context."""

from enum import Enum
from typing import Any


class TargetModeMismatchError(TypeError):
    """
    Exception raised when a scoring engine is given a target its mode cannot score.

    A role-weighted engine needs a RoleProfile; a requirement-weighted engine
    needs a JobProfile.

    Attributes:
        message: Error description
        mode: The engine's configured scoring mode
        target: The target that was passed in
    """

    def __init__(self, mode: Enum, target: Any):
        self.mode = mode
        self.target = target
        self.message = (
            f"{mode.value}-weighted scoring cannot score a {type(target).__name__} target"
        )
        super().__init__(self.message)
