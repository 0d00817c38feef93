"""
Use Cases

Organized into domain folders:
- signup/: Account signup and provisioning
- leads/: Lead capture
- calls/: Outbound voice calls

Import from subdirectories for better organization.
"""

from .signup import SignupCommand, SignupResponse, SignupUseCase
from .leads import SaveLeadUseCase
from .calls import PlaceCallUseCase

__all__ = [
    # Signup
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    # Leads
    "SaveLeadUseCase",
    # Calls
    "PlaceCallUseCase",
]
