import httpx
import pytest

from src.adapter.services.client_service import HttpClientService
from src.app.services.client_service import CLIENT_ACCESS_PATHS


@pytest.fixture
def service(platform_api):
    return HttpClientService(platform_api)


def test_access_paths_are_fixed():
    assert len(CLIENT_ACCESS_PATHS) == 13
    assert CLIENT_ACCESS_PATHS[0] == "/home"
    assert CLIENT_ACCESS_PATHS[-1] == "/campaigns"
    assert len(set(CLIENT_ACCESS_PATHS)) == 13


@pytest.mark.asyncio
async def test_create_client(service, handler, test_data):
    handler.respond(200, test_data.get_copy("client_response"))

    result = await service.create_client("org-1", "Jane", "jane@x.com", "JanePass123!")

    assert result.is_ok()
    client = result.value
    assert client.org_id == "org-1"
    assert client.is_org_admin is True
    assert client.access_paths == list(CLIENT_ACCESS_PATHS)
    assert "dashboard_password" not in client.snapshot()

    request = handler.requests[0]
    assert request.method == "PUT"
    assert request.url.path == "/v3/clients"
    assert handler.last_json == {
        "orgId": "org-1",
        "name": "Jane",
        "email": "jane@x.com",
        "dashboardPassword": "JanePass123!",
        "canAccess": list(CLIENT_ACCESS_PATHS),
        "isOrgAdmin": True,
    }


@pytest.mark.asyncio
async def test_create_client_accepts_unrecognized_success_body(service, handler):
    handler.respond(200, {"created": "yes"})

    result = await service.create_client("org-1", "Jane", "jane@x.com", "pw123456")

    assert result.is_ok()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, body",
    [
        (200, {"success": False}),
        (200, {"error": "email taken"}),
        (500, {"success": True}),
        (200, "oops"),
    ],
)
async def test_create_client_failures(service, handler, status_code, body):
    handler.respond(status_code, body)

    result = await service.create_client("org-1", "Jane", "jane@x.com", "pw123456")

    assert result.is_err()
    assert result.error.code == "CLIENT_PROVISIONING_FAILED"


@pytest.mark.asyncio
async def test_create_client_transport_error(service, handler):
    handler.respond(error=httpx.ConnectError)

    result = await service.create_client("org-1", "Jane", "jane@x.com", "pw123456")

    assert result.is_err()
    assert result.error.code == "CLIENT_PROVISIONING_FAILED"
    assert len(handler.requests) == 1
