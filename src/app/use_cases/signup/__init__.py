"""
Signup Use Cases

Account provisioning across identity, agent and organization platforms.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import (
    SignupCommand,
    SignupDependencies,
    SignupResponse,
    SignupSettings,
    UserData,
)
from .signup_states import SignupState

__all__ = [
    # Use Cases
    "SignupUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "UserData",
    # Wiring
    "SignupDependencies",
    "SignupSettings",
    "SignupState",
]
