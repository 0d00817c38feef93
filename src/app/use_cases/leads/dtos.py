"""
Lead Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class SaveLeadResponse(BaseModel):
    """Response for save lead use case"""

    success: bool
    message: str
    id: str
