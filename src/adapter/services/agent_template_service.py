import logging

from libs.result import Error, Result, Return
from src.adapter.services.platform_api import PlatformApi, PlatformRequestError
from src.adapter.services.response_ids import find_id, nested_id
from src.app.services.agent_template_service import IAgentTemplateService
from src.domain.entities import BusinessType, ClonedAgent, TemplateExport

logger = logging.getLogger(__name__)

AGENT_NAMES = {
    BusinessType.dropshipper: "Dropshipper",
    BusinessType.themePage: "Theme Page",
    BusinessType.influencer: "Influencer",
}
DEFAULT_AGENT_NAME = "Custom Agent"


def agent_name_for(business_type: BusinessType) -> str:
    return AGENT_NAMES.get(business_type, DEFAULT_AGENT_NAME)


class HttpAgentTemplateService(IAgentTemplateService):
    """Exports and imports agent templates through the agent platform API"""

    def __init__(self, api: PlatformApi):
        self.api = api

    async def export_template(self, template_id: str) -> Result[TemplateExport]:
        logger.info(f"Exporting agent template with ID {template_id}")
        try:
            status_code, body = await self.api.request_json(
                "GET", f"/agents/{template_id}/export-template"
            )
        except PlatformRequestError as exc:
            logger.error(f"Template export for {template_id} failed: {exc}")
            return Return.err(
                Error("TEMPLATE_UNAVAILABLE", "Failed to export agent template", str(exc))
            )

        if status_code >= 400 or not isinstance(body, dict) or not body.get("agentTemplate"):
            logger.error(f"Template export for {template_id} returned no template: {body}")
            return Return.err(
                Error(
                    "TEMPLATE_UNAVAILABLE",
                    "Failed to export agent template",
                    f"status {status_code}",
                )
            )

        return Return.ok(
            TemplateExport(
                raw_template_payload=body["agentTemplate"],
                source_template_id=template_id,
            )
        )

    async def import_template(
        self,
        export: TemplateExport,
        business_type: BusinessType,
        source_template_id: str,
    ) -> Result[ClonedAgent]:
        agent_name = agent_name_for(business_type)
        logger.info(f"Importing agent template for business type: {business_type.value}")

        payload = {
            "agentTemplate": export.raw_template_payload,
            "agentName": agent_name,
            "fromAgentId": source_template_id,
        }
        try:
            status_code, body = await self.api.request_json(
                "POST", "/agents/import-template", payload
            )
        except PlatformRequestError as exc:
            logger.error(f"Template import from {source_template_id} failed: {exc}")
            return Return.err(
                Error("TEMPLATE_IMPORT_FAILED", "Failed to import agent template", str(exc))
            )

        agent_id = nested_id(body, "agent", "ID") or nested_id(body, "agentCreated", "ID")
        if agent_id is None and status_code < 400:
            agent_id = find_id(body)
            if agent_id is not None:
                logger.warning(f"Unexpected import response shape, using scanned ID {agent_id}")

        if agent_id is None:
            logger.error(f"Template import from {source_template_id} returned no ID: {body}")
            return Return.err(
                Error(
                    "TEMPLATE_IMPORT_FAILED",
                    "Failed to import agent template",
                    f"status {status_code}",
                )
            )

        logger.info(f"Successfully imported agent with ID: {agent_id}")
        return Return.ok(
            ClonedAgent(id=agent_id, name=agent_name, source_template_id=source_template_id)
        )
