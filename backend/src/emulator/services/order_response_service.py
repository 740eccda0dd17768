"""Order response service: coupon selection, synthesis and delay."""

import asyncio
import logging
import random
import time
from datetime import datetime

from emulator.middleware.metrics import record_emulated_delay, record_orders_generated
from emulator.schemas.order import EmulatedResponse, OrderFilters, OrderResponse
from emulator.services.catalog_service import CouponCatalog, select_coupon
from emulator.services.delay_service import DelayEmulator
from emulator.services.order_service import STATUS_SUCCESS, synthesize_orders
from emulator.services.response_service import assemble_response

logger = logging.getLogger(__name__)


class OrderResponseService:
    """Service class for emulated order responses.

    Built once per request, so its random source is never shared between
    concurrent requests.
    """

    def __init__(
        self,
        catalog: CouponCatalog,
        delay_emulator: DelayEmulator,
        rng: random.Random | None = None,
    ):
        self.catalog = catalog
        self.delay_emulator = delay_emulator
        self.rng = rng or random.Random()

    def build_order_response(
        self, filters: OrderFilters, now: datetime | None = None
    ) -> OrderResponse:
        """Select a coupon and synthesize the full response envelope.

        Args:
            filters: Request filters
            now: Generation time, local wall clock when omitted

        Returns:
            Response envelope

        Raises:
            EmptyCatalogError: If there are no coupons
            InvalidCatalogEntryError: If the selected coupon is unusable
        """
        coupon = select_coupon(self.catalog, self.rng)
        logger.debug(f"Selected CPN {coupon.id}")

        now = now or datetime.now()
        orders = synthesize_orders(filters, coupon, now, self.rng)
        record_orders_generated(len(orders))
        return assemble_response(orders, filters, now)

    async def generate_order_response(
        self, request_id: str | None, filters: OrderFilters
    ) -> OrderResponse:
        """Build the order response and hold it for an emulated delay."""
        logger.info(f"Generating order response for request {request_id}")
        response = self.build_order_response(filters)
        logger.info(
            f"Request {request_id}: created {len(response.data.orders)} orders"
        )
        await self._emulate_delay()
        return response

    async def generate_emulated_response(self) -> EmulatedResponse:
        """Generic success payload returned after an emulated delay."""
        now = datetime.now()
        response = EmulatedResponse(
            timestamp=int(time.time() * 1000),
            status=STATUS_SUCCESS,
            message=f"Response generated at: {now.isoformat()}",
        )
        await self._emulate_delay()
        return response

    async def _emulate_delay(self) -> None:
        delay_ms = self.delay_emulator.sample(self.rng)
        logger.debug(f"Responding after {delay_ms} ms")
        record_emulated_delay(delay_ms)
        await asyncio.sleep(delay_ms / 1000)
