"""API dependencies for catalog, delay and service access."""

from typing import Annotated

from fastapi import Depends, Request

from emulator.services.catalog_service import CouponCatalog
from emulator.services.delay_service import DelayEmulator
from emulator.services.order_response_service import OrderResponseService


def get_catalog(request: Request) -> CouponCatalog:
    """Get the coupon catalog loaded at startup."""
    return request.app.state.catalog


def get_delay_emulator(request: Request) -> DelayEmulator:
    """Get the delay emulator built from validated settings."""
    return request.app.state.delay_emulator


def get_order_response_service(
    catalog: Annotated[CouponCatalog, Depends(get_catalog)],
    delay_emulator: Annotated[DelayEmulator, Depends(get_delay_emulator)],
) -> OrderResponseService:
    """Get a fresh OrderResponseService with its own random source."""
    return OrderResponseService(catalog, delay_emulator)


# Type aliases for cleaner dependency injection
CatalogDep = Annotated[CouponCatalog, Depends(get_catalog)]
OrderResponseServiceDep = Annotated[
    OrderResponseService, Depends(get_order_response_service)
]
