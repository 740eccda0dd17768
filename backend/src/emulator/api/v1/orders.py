"""Order emulation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Header

from emulator.api.deps import OrderResponseServiceDep
from emulator.schemas.order import OrderRequest, OrderResponse

router = APIRouter()


@router.post("/cpn/orders", response_model=OrderResponse)
async def get_orders(
    order_request: OrderRequest,
    service: OrderResponseServiceDep,
    x_request_id: Annotated[str | None, Header()] = None,
):
    """Return synthetic coupon orders matching the request filters.

    The response is held back for a random delay within the configured bounds.
    """
    return await service.generate_order_response(x_request_id, order_request.filters)
