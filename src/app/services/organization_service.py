from abc import ABC, abstractmethod
from typing import Optional

from libs.result import Result
from src.domain.entities import Organization


class IOrganizationService(ABC):
    """Organization provisioning interface"""

    @abstractmethod
    async def create_organization(
        self, name: str, widget_id: Optional[str]
    ) -> Result[Organization]:
        """Create an organization whose initial widget set is {widget_id}"""
        pass
