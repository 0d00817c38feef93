"""Lead capture use cases."""

from .save_lead_use_case import SaveLeadUseCase
from .dtos import SaveLeadResponse

__all__ = [
    "SaveLeadUseCase",
    "SaveLeadResponse",
]
