"""Business logic services."""

from emulator.services.catalog_service import CouponCatalog, load_catalog, select_coupon
from emulator.services.delay_service import DelayEmulator
from emulator.services.order_response_service import OrderResponseService

__all__ = [
    "CouponCatalog",
    "load_catalog",
    "select_coupon",
    "DelayEmulator",
    "OrderResponseService",
]
