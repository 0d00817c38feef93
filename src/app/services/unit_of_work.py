from abc import ABC, abstractmethod

from src.app.repositories.identity_repository import IIdentityRepository
from src.app.repositories.lead_repository import ILeadRepository
from src.app.repositories.signup_record_repository import ISignupRecordRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    identities: IIdentityRepository
    signup_records: ISignupRecordRepository
    leads: ILeadRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
