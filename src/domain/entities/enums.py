"""
Signup Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Optional


class BusinessType(str, Enum):
    """Business category chosen at signup; selects the agent template"""

    dropshipper = "dropshipper"
    themePage = "themePage"
    influencer = "influencer"
    other = "other"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "BusinessType":
        """Map a raw request value to a business type, falling back to `other`"""
        try:
            return cls(value)
        except ValueError:
            return cls.other


class Plan(str, Enum):
    """Subscription plan assigned to a new account"""

    free = "free"


class LeadSource(str, Enum):
    """Known lead sources with their own required fields"""

    newsletter = "newsletter"
    voice_assistant = "voice-assistant"
