"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (raw signup intent)
- SignupResponse: Output from use case (public fields only)
- SignupDependencies / SignupSettings: collaborators and configuration
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.app.services.agent_template_service import IAgentTemplateService
from src.app.services.client_service import IClientService
from src.app.services.identity_store import IIdentityStore
from src.app.services.organization_service import IOrganizationService
from src.app.services.signup_record_store import ISignupRecordStore
from src.domain.entities import BusinessType


class SignupCommand(BaseModel):
    """
    Signup command - represents a signup attempt

    Fields are optional here; the use case owns the required-field rule so
    that a missing field is answered before any collaborator is called.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    business_type: Optional[str] = None


class UserData(BaseModel):
    """Public account fields echoed back on signup"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    business_type: str
    plan: str


class SignupResponse(BaseModel):
    """
    Signup response - structured output from use case

    Never reveals which optional provisioning steps degraded.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    user_id: str
    user_data: UserData


@dataclass(frozen=True)
class SignupDependencies:
    """Collaborators the signup flow talks to"""

    identity_store: IIdentityStore
    agent_templates: IAgentTemplateService
    organizations: IOrganizationService
    clients: IClientService
    records: ISignupRecordStore


@dataclass(frozen=True)
class SignupSettings:
    """Template selection and defaults for provisioning"""

    template_ids: Mapping[str, str]
    default_widget_id: str
    step_timeout_seconds: Optional[float] = None

    def template_id_for(self, business_type: BusinessType) -> str:
        """Template for a business type, falling back to the `other` template"""
        template_id = self.template_ids.get(business_type.value)
        if not template_id:
            template_id = self.template_ids[BusinessType.other.value]
        return template_id
