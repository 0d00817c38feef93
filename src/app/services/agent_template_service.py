from abc import ABC, abstractmethod

from libs.result import Result
from src.domain.entities import BusinessType, ClonedAgent, TemplateExport


class IAgentTemplateService(ABC):
    """Agent template service interface - exports and clones agent templates"""

    @abstractmethod
    async def export_template(self, template_id: str) -> Result[TemplateExport]:
        """Fetch a template by id; Error(TEMPLATE_UNAVAILABLE) when unusable"""
        pass

    @abstractmethod
    async def import_template(
        self,
        export: TemplateExport,
        business_type: BusinessType,
        source_template_id: str,
    ) -> Result[ClonedAgent]:
        """Clone an exported template into a new agent"""
        pass
