"""
Save Lead Use Case

Stores a marketing lead after source-specific validation.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Lead, LeadSource
from .dtos import SaveLeadResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    LeadSource.newsletter.value: (
        ("email",),
        "Email is required for newsletter subscriptions",
    ),
    LeadSource.voice_assistant.value: (
        ("fullName", "email", "phoneNumber"),
        "Name, email, and phone number are required for voice assistant leads",
    ),
}


class SaveLeadUseCase:
    """
    Use case for capturing leads from the landing page.

    Business Rules:
    - newsletter leads need an email
    - voice-assistant leads need fullName, email and phoneNumber
    - other sources are stored as submitted
    - a client timestamp (ISO-8601, UTC) is added when absent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lead_data: Dict[str, Any]) -> Result[SaveLeadResponse]:
        source = lead_data.get("source")
        required = REQUIRED_FIELDS.get(source)
        if required is not None:
            fields, message = required
            if any(not lead_data.get(field) for field in fields):
                return Return.err(Error("INVALID_LEAD", message))

        payload = dict(lead_data)
        if not payload.get("timestamp"):
            payload["timestamp"] = datetime.utcnow().isoformat(timespec="milliseconds") + "Z"

        try:
            async with self.uow:
                lead = await self.uow.leads.create(
                    Lead(source=source if isinstance(source, str) else None, payload=payload)
                )
                await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Error saving lead data: {exc}")
            return Return.err(Error("LEAD_PERSIST_FAILED", str(exc)))

        logger.info(f"Lead saved with ID: {lead.id}")
        return Return.ok(
            SaveLeadResponse(
                success=True, message="Lead data saved successfully", id=str(lead.id)
            )
        )
