from abc import ABC, abstractmethod
from typing import Optional

from libs.result import Result
from src.domain.entities import SignupRecord


class ISignupRecordStore(ABC):
    """Record store interface - persists the aggregate signup record"""

    @abstractmethod
    async def save(self, identity_id: str, record: SignupRecord) -> Result[SignupRecord]:
        """Idempotent upsert keyed by identity_id"""
        pass

    @abstractmethod
    async def get(self, identity_id: str) -> Optional[SignupRecord]:
        """Load the record for an identity, if any"""
        pass
