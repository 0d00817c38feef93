"""
Signup Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import BusinessType, LeadSource, Plan

# Export all entities
from .identity import Identity
from .signup_record import SignupRecord
from .lead import Lead
from .provisioning import ClonedAgent, Client, Organization, TemplateExport

__all__ = [
    # Enums
    "BusinessType",
    "LeadSource",
    "Plan",
    # Entities
    "Identity",
    "SignupRecord",
    "Lead",
    # Value objects
    "TemplateExport",
    "ClonedAgent",
    "Organization",
    "Client",
]
