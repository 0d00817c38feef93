from abc import ABC, abstractmethod

from libs.result import Result
from src.domain.entities import Client

# Feature paths every new client can access, in dashboard order
CLIENT_ACCESS_PATHS = (
    "/home",
    "/prompt",
    "/overview",
    "/voice",
    "/billing",
    "/convos",
    "/analytics",
    "/channels",
    "/leads",
    "/kb",
    "/settings",
    "/metrics",
    "/campaigns",
)


class IClientService(ABC):
    """Client provisioning interface"""

    @abstractmethod
    async def create_client(
        self, org_id: str, name: str, email: str, password: str
    ) -> Result[Client]:
        """Create an org-admin client bound to org_id"""
        pass
