import json

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_http_client, get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


class FakePlatform:
    """MockTransport handler standing in for the agent and provisioning platforms

    Routes are keyed by (method, path suffix); unknown routes answer 404.
    """

    def __init__(self, data):
        self.requests = []
        self.routes = {
            ("GET", "/export-template"): (200, data.get_copy("export_response")),
            ("POST", "/agents/import-template"): (200, data.get_copy("import_response_agent")),
            ("PUT", "/orgs"): (200, data.get_copy("org_response")),
            ("PUT", "/clients"): (200, data.get_copy("client_response")),
            ("POST", "/calls"): (200, data.get_copy("call_response")),
        }
        self.failures = {}

    def respond(self, method, suffix, status_code, body):
        self.routes[(method, suffix)] = (status_code, body)

    def fail(self, method, suffix, error=httpx.ConnectError):
        self.failures[(method, suffix)] = error

    def fail_all(self, error=httpx.ConnectError):
        for route in self.routes:
            self.fail(*route, error=error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for (method, suffix), error in self.failures.items():
            if request.method == method and request.url.path.endswith(suffix):
                raise error(f"simulated {error.__name__}", request=request)
        for (method, suffix), (status_code, body) in self.routes.items():
            if request.method == method and request.url.path.endswith(suffix):
                return httpx.Response(status_code, json=body)
        return httpx.Response(404, json={"error": "not found"})

    def paths(self, method=None):
        return [
            request.url.path
            for request in self.requests
            if method is None or request.method == method
        ]

    def json_for(self, suffix):
        for request in self.requests:
            if request.url.path.endswith(suffix):
                return json.loads(request.content)
        return None


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def fake_platform(test_data):
    return FakePlatform(test_data)


@pytest.fixture(autouse=True)
def app_config(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "API_KEY", "test-api-key")
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(ApplicationConfig, "SIGNUP_ENABLED", True)
    return ApplicationConfig


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine, fake_platform, app_config):
    from src.api.app import create_app

    app = create_app(app_config)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_platform)) as http:
            yield http

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_http_client] = override_get_http_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
