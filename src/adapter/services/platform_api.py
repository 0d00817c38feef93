import logging
from typing import Any, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)


class PlatformRequestError(Exception):
    """A platform call failed before producing a JSON body"""


class PlatformApi:
    """Thin JSON-over-HTTP wrapper for the agent and provisioning platforms"""

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def request_json(
        self, method: str, path: str, payload: Optional[dict] = None
    ) -> Tuple[int, Any]:
        """
        Send a request and decode the JSON response.

        Returns:
            (status_code, body) - the body is returned for any status

        Raises:
            PlatformRequestError: missing API key, transport error, timeout,
            or a body that is not JSON
        """
        if not self.api_key:
            raise PlatformRequestError("API_KEY is not configured")

        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = await self.http.request(method, url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise PlatformRequestError(f"{method} {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise PlatformRequestError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise PlatformRequestError(
                f"{method} {path} returned non-JSON body (status {response.status_code})"
            ) from exc

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response.status_code, body
