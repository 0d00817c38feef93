from abc import ABC, abstractmethod
from typing import Any, Dict

from libs.result import Result


class ICallService(ABC):
    """Outbound telephony interface"""

    @abstractmethod
    async def place_call(self, phone_number: str) -> Result[Dict[str, Any]]:
        """Dial phone_number with the configured call agent"""
        pass
