"""
Place Call Use Case

Dials a phone number with the configured voice agent. Single attempt.
"""

from typing import Any, Dict, Optional

from libs.result import Error, Result, Return
from src.app.services.call_service import ICallService


class PlaceCallUseCase:
    def __init__(self, calls: ICallService):
        self.calls = calls

    async def execute(self, phone_number: Optional[str]) -> Result[Dict[str, Any]]:
        if not phone_number or not phone_number.strip():
            return Return.err(Error("MISSING_PHONE_NUMBER", "phoneNumber is required"))
        return await self.calls.place_call(phone_number.strip())
