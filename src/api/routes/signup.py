from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.app.use_cases.signup import SignupCommand, SignupResponse, SignupUseCase
from src.depends import get_signup_use_case

router = APIRouter(tags=["Signup"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Fields are optional at the HTTP layer so that a missing field is
    answered with 400 by the use case rather than a 422 from FastAPI.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, description="Account display name")
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")
    business_type: Optional[str] = Field(
        None,
        alias="businessType",
        description="dropshipper, themePage, influencer or other (default)",
    )


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest, use_case: SignupUseCase = Depends(get_signup_use_case)
):
    """
    User Signup

    Creates the identity, then provisions the cloned agent, organization and
    client on a best-effort basis and stores the signup record. Provisioning
    failures never change the response.

    Raises:
        - 400 Bad Request: name, email or password missing
        - 409 Conflict: an account already exists for the email
        - 500 Internal Server Error: identity provider failure
    """
    command = SignupCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        business_type=request.business_type,
    )

    use_case_result = await use_case.execute(command)

    if use_case_result.is_err():
        error = use_case_result.error
        if error.code == "MISSING_FIELDS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error, message="Error creating user account")

    return use_case_result.value
