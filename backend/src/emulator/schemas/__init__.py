"""Pydantic schemas for request/response validation."""

from emulator.schemas.coupon import Cpn, CpnOffer
from emulator.schemas.order import (
    EmulatedResponse,
    OrderFilters,
    OrderRequest,
    OrderResponse,
    OrderResponseData,
    SynthesizedOrder,
)

__all__ = [
    "Cpn",
    "CpnOffer",
    "OrderFilters",
    "OrderRequest",
    "OrderResponse",
    "OrderResponseData",
    "SynthesizedOrder",
    "EmulatedResponse",
]
