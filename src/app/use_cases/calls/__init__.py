"""Outbound call use cases."""

from .place_call_use_case import PlaceCallUseCase

__all__ = ["PlaceCallUseCase"]
