import json

import httpx
import pytest_asyncio

from src.adapter.services.platform_api import PlatformApi

BASE_URL = "https://platform.example.com/v3"


class RecordingHandler:
    """MockTransport handler returning one canned response and keeping requests"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {}
        self.error = None

    def respond(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"simulated {self.error.__name__}", request=request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest_asyncio.fixture
async def handler():
    return RecordingHandler()


@pytest_asyncio.fixture
async def platform_api(handler):
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        yield PlatformApi(http, BASE_URL, "test-api-key")
