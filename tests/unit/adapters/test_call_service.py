import httpx
import pytest

from src.adapter.services.call_service import HttpCallService


@pytest.fixture
def service(platform_api):
    return HttpCallService(platform_api, "call-agent-1")


@pytest.mark.asyncio
async def test_place_call(service, handler, test_data):
    handler.respond(200, test_data.get_copy("call_response"))

    result = await service.place_call("+15550100")

    assert result.is_ok()
    assert result.value["callId"] == "call-77"
    assert handler.requests[0].url.path == "/v3/calls"
    assert handler.last_json == {"to": "+15550100", "agentId": "call-agent-1"}


@pytest.mark.asyncio
async def test_place_call_rejected(service, handler):
    handler.respond(400, {"error": "invalid number"})

    result = await service.place_call("123")

    assert result.is_err()
    assert result.error.code == "CALL_FAILED"
    assert "400" in result.error.message


@pytest.mark.asyncio
async def test_place_call_transport_error(service, handler):
    handler.respond(error=httpx.ReadTimeout)

    result = await service.place_call("+15550100")

    assert result.is_err()
    assert result.error.code == "CALL_FAILED"
