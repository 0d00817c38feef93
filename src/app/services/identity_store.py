from abc import ABC, abstractmethod
from dataclasses import dataclass

from libs.result import Result
from src.domain.entities import Identity

# Normalized identity error codes
DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
SIGNUP_DISABLED = "SIGNUP_DISABLED"
INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
INVALID_EMAIL = "INVALID_EMAIL"
WEAK_PASSWORD = "WEAK_PASSWORD"
IDENTITY_STORE_UNAVAILABLE = "IDENTITY_STORE_UNAVAILABLE"

IDENTITY_ERROR_CODES = frozenset(
    {
        DUPLICATE_IDENTITY,
        SIGNUP_DISABLED,
        INVALID_CREDENTIAL,
        INVALID_EMAIL,
        WEAK_PASSWORD,
        IDENTITY_STORE_UNAVAILABLE,
    }
)


@dataclass
class CreatedIdentity:
    """Identity returned by create(), flagged when it already existed"""

    identity: Identity
    already_exists: bool = False


class IIdentityStore(ABC):
    """Identity store interface - creates and looks up identities by email"""

    @abstractmethod
    async def exists(self, email: str) -> Result[bool]:
        """Check whether an identity with this exact email exists"""
        pass

    @abstractmethod
    async def create(
        self, email: str, password: str, display_name: str
    ) -> Result[CreatedIdentity]:
        """
        Create a new identity.

        An existing email is resolved by authenticating with the supplied
        password; on success the existing identity is returned with
        already_exists=True, otherwise Error(DUPLICATE_IDENTITY).
        """
        pass
