"""
Provisioning Value Objects

Transient results of calls to the agent and provisioning platforms. Only
their snapshots survive, inside SignupRecord.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class TemplateExport(BaseModel):
    """Exported agent template, fetched per signup and never persisted"""

    raw_template_payload: Any
    source_template_id: str


class ClonedAgent(BaseModel):
    """Per-signup copy of a business-type template"""

    id: str
    name: str
    source_template_id: str


class Organization(BaseModel):
    """Tenant organization bound to a cloned agent as its first widget"""

    id: Optional[str] = None
    name: str
    widget_ids: List[str] = Field(default_factory=list)

    @field_validator("widget_ids")
    @classmethod
    def _dedupe_widget_ids(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))


class Client(BaseModel):
    """User-facing client record inside an organization"""

    org_id: str
    name: str
    email: str
    dashboard_password: str = Field(exclude=True, repr=False)
    access_paths: List[str]
    is_org_admin: bool = True

    def snapshot(self) -> Dict[str, Any]:
        """Persistable view; never includes the dashboard password"""
        return self.model_dump()
