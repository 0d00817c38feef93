import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.adapter.services.platform_api import PlatformApi, PlatformRequestError
from src.adapter.services.response_ids import find_id, nested_id
from src.app.services.organization_service import IOrganizationService
from src.domain.entities import Organization

logger = logging.getLogger(__name__)


class HttpOrganizationService(IOrganizationService):
    """Creates organizations through the provisioning platform API"""

    def __init__(self, api: PlatformApi, default_widget_id: str):
        self.api = api
        self.default_widget_id = default_widget_id

    async def create_organization(
        self, name: str, widget_id: Optional[str]
    ) -> Result[Organization]:
        widget = widget_id or self.default_widget_id
        logger.info(f"Creating organization for {name} with widget ID {widget}")

        payload = {
            "name": name,
            "preferredLanguage": "eng",
            "widgetIDs": [widget],
            "canSelfEdit": True,
            "disallowAnyTags": False,
            "dashboardLayout": "horizontal",
        }
        try:
            status_code, body = await self.api.request_json("PUT", "/orgs", payload)
        except PlatformRequestError as exc:
            logger.error(f"Organization creation for {name} failed: {exc}")
            return Return.err(
                Error("ORG_PROVISIONING_FAILED", "Failed to create organization", str(exc))
            )

        if status_code >= 400 or not isinstance(body, dict) or body.get("success") is False:
            logger.error(f"Organization creation for {name} rejected: {body}")
            return Return.err(
                Error(
                    "ORG_PROVISIONING_FAILED",
                    "Failed to create organization",
                    f"status {status_code}",
                )
            )

        org_id = nested_id(body, "data", "ID") or nested_id(body, "ID")
        if org_id is None:
            org_id = find_id(body)
            if org_id is not None:
                logger.warning(f"Unexpected organization response shape, using scanned ID {org_id}")

        if org_id is None and body.get("success") is not True:
            logger.error(f"Organization creation for {name} returned no ID: {body}")
            return Return.err(
                Error("ORG_PROVISIONING_FAILED", "Failed to create organization", "no ID")
            )
        if org_id is None:
            logger.warning(f"Organization for {name} acknowledged without an ID")
        else:
            logger.info(f"Successfully created organization with ID: {org_id}")

        return Return.ok(Organization(id=org_id, name=name, widget_ids=[widget]))
