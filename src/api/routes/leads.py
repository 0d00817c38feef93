from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.leads import SaveLeadResponse, SaveLeadUseCase
from src.depends import get_unit_of_work

router = APIRouter(tags=["Leads"])


@router.post(
    "/leads", status_code=status.HTTP_201_CREATED, response_model=SaveLeadResponse
)
async def save_lead(
    lead_data: Dict[str, Any] = Body(...),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Save Lead

    Stores a newsletter or voice-assistant lead from the landing page.

    Raises:
        - 400 Bad Request: required fields for the lead source are missing
        - 500 Internal Server Error: the lead could not be stored
    """
    use_case = SaveLeadUseCase(uow)
    result = await use_case.execute(lead_data)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_LEAD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error, message="Failed to save lead data")

    return result.value
