from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.app.use_cases.calls import PlaceCallUseCase
from src.depends import get_place_call_use_case

router = APIRouter(tags=["Calls"])


class CallRequest(BaseModel):
    """Outbound call request payload"""

    model_config = ConfigDict(populate_by_name=True)

    phone_number: Optional[str] = Field(None, alias="phoneNumber")


@router.post("/calls", status_code=status.HTTP_200_OK)
async def place_call(
    request: CallRequest, use_case: PlaceCallUseCase = Depends(get_place_call_use_case)
):
    """
    Place Call

    Dials the number with the configured voice agent and returns the
    platform's response unchanged.

    Raises:
        - 400 Bad Request: phoneNumber missing
        - 500 Internal Server Error: the platform rejected or failed the call
    """
    result = await use_case.execute(request.phone_number)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_PHONE_NUMBER":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error, message="Failed to initiate call")

    return result.value
