import logging
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.adapter.services.platform_api import PlatformApi, PlatformRequestError
from src.app.services.call_service import ICallService

logger = logging.getLogger(__name__)


class HttpCallService(ICallService):
    """Places outbound calls through the agent platform API"""

    def __init__(self, api: PlatformApi, agent_id: str):
        self.api = api
        self.agent_id = agent_id

    async def place_call(self, phone_number: str) -> Result[Dict[str, Any]]:
        payload = {"to": phone_number, "agentId": self.agent_id}
        try:
            status_code, body = await self.api.request_json("POST", "/calls", payload)
        except PlatformRequestError as exc:
            logger.error(f"Error making call: {exc}")
            return Return.err(Error("CALL_FAILED", str(exc)))

        if status_code >= 400:
            logger.error(f"Call request rejected with status {status_code}: {body}")
            return Return.err(
                Error("CALL_FAILED", f"Call platform returned status {status_code}")
            )

        return Return.ok(body)
