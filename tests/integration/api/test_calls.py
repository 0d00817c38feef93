import httpx
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_place_call(client: AsyncClient, fake_platform, test_data):
    response = await client.post("/calls", json={"phoneNumber": "+15550100"})

    assert response.status_code == 200
    assert response.json() == test_data.get_copy("call_response")
    assert fake_platform.paths() == ["/v3/calls"]
    assert fake_platform.json_for("/calls") == {
        "to": "+15550100",
        "agentId": "tTKtg6VdMS9UKvKg2WtU",
    }


@pytest.mark.asyncio
async def test_place_call_missing_number(client: AsyncClient, fake_platform):
    response = await client.post("/calls", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "phoneNumber is required"}
    assert fake_platform.requests == []


@pytest.mark.asyncio
async def test_place_call_platform_failure(client: AsyncClient, fake_platform):
    fake_platform.fail("POST", "/calls", error=httpx.ConnectError)

    response = await client.post("/calls", json={"phoneNumber": "+15550100"})

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Failed to initiate call"
    assert data["code"] == "CALL_FAILED"
    assert len(fake_platform.requests) == 1
