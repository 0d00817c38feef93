import logging

from libs.result import Error, Result, Return
from src.adapter.services.platform_api import PlatformApi, PlatformRequestError
from src.app.services.client_service import CLIENT_ACCESS_PATHS, IClientService
from src.domain.entities import Client

logger = logging.getLogger(__name__)


class HttpClientService(IClientService):
    """Creates organization clients through the provisioning platform API"""

    def __init__(self, api: PlatformApi):
        self.api = api

    async def create_client(
        self, org_id: str, name: str, email: str, password: str
    ) -> Result[Client]:
        logger.info(f"Creating client for org ID {org_id}")

        client = Client(
            org_id=org_id,
            name=name,
            email=email,
            dashboard_password=password,
            access_paths=list(CLIENT_ACCESS_PATHS),
            is_org_admin=True,
        )
        payload = {
            "orgId": client.org_id,
            "name": client.name,
            "email": client.email,
            "dashboardPassword": client.dashboard_password,
            "canAccess": client.access_paths,
            "isOrgAdmin": client.is_org_admin,
        }
        try:
            status_code, body = await self.api.request_json("PUT", "/clients", payload)
        except PlatformRequestError as exc:
            logger.error(f"Client creation for org {org_id} failed: {exc}")
            return Return.err(
                Error("CLIENT_PROVISIONING_FAILED", "Failed to create client", str(exc))
            )

        if (
            status_code >= 400
            or not isinstance(body, dict)
            or body.get("success") is False
            or body.get("error")
        ):
            logger.error(f"Client creation for org {org_id} rejected: {body}")
            return Return.err(
                Error(
                    "CLIENT_PROVISIONING_FAILED",
                    "Failed to create client",
                    f"status {status_code}",
                )
            )

        logger.info(f"Successfully created client for org ID {org_id}")
        return Return.ok(client)
