"""Response envelope assembly."""

from datetime import datetime

from emulator.core.timefmt import format_datetime
from emulator.schemas.order import (
    CouponStats,
    LastOrder,
    OrderFilters,
    OrderResponse,
    OrderResponseData,
    OrderStats,
    SynthesizedOrder,
)
from emulator.services.order_service import PRODUCT_TYPE_COUPON, STATUS_SUCCESS

LAST_ORDER_OFFSET = 10


def echo_filters(filters: OrderFilters) -> OrderFilters:
    """Echo request filters with order_id_from and order_ids mutually exclusive."""
    if filters.order_ids:
        order_id_from, order_ids = None, list(filters.order_ids)
    else:
        order_id_from, order_ids = filters.order_id_from, None

    return OrderFilters(
        limit=filters.limit,
        product_type=PRODUCT_TYPE_COUPON,
        order_id_from=order_id_from,
        order_ids=order_ids,
    )


def build_stats(filters: OrderFilters, now: datetime) -> OrderStats:
    last_order_id = None
    if filters.order_id_from is not None:
        last_order_id = filters.order_id_from + LAST_ORDER_OFFSET

    return OrderStats(
        coupon=CouponStats(
            last_order=LastOrder(
                order_id=last_order_id,
                date_created=format_datetime(now),
            )
        )
    )


def assemble_response(
    orders: list[SynthesizedOrder],
    filters: OrderFilters,
    now: datetime,
) -> OrderResponse:
    """Wrap generated orders into the success envelope.

    Args:
        orders: Orders produced for the request
        filters: Original request filters
        now: Generation time used for stats and timestamp

    Returns:
        Response envelope
    """
    return OrderResponse(
        status=STATUS_SUCCESS,
        messages=[],
        data=OrderResponseData(
            filters=echo_filters(filters),
            stats=build_stats(filters, now),
            timestamp=format_datetime(now),
            orders=orders,
        ),
    )
