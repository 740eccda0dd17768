"""Synthetic order generation."""

import random
import uuid
from datetime import datetime, timedelta

from emulator.core.errors import InvalidCatalogEntryError
from emulator.core.timefmt import format_datetime
from emulator.schemas.coupon import Cpn, CpnOffer
from emulator.schemas.order import (
    OrderFilters,
    Partner,
    Product,
    ProductOffer,
    Promocode,
    SynthesizedOrder,
    TotalAmount,
)

STATUS_SUCCESS = "success"
PRODUCT_TYPE_COUPON = "coupon"
RULES_URL = "https://rules.pdf"
CHANNEL_WEB = "web"
PAYMENT_TYPE_SPS_BONUSES = "spsBonuses"
COMBINED_PDF_URL = "https://combined.pdf"
PROMO_CODE_TEXT = "CODE123"
PROMO_CODE_PIN = 1234
PROMO_CODE_TTL = timedelta(hours=1)
TOTAL_AMOUNT_RUB = 100
CLIENT_ID_UPPER = 1_000_000


def determine_order_count(filters: OrderFilters) -> int:
    """Number of orders to fabricate: order_ids wins over limit, default 1."""
    if filters.order_ids:
        return len(filters.order_ids)
    if filters.limit is not None:
        return filters.limit
    return 1


def determine_order_number(filters: OrderFilters, index: int) -> int:
    """Order number for the order at ``index``.

    Raises:
        IndexError: If ``index`` is outside ``order_ids``
    """
    if filters.order_ids:
        if not 0 <= index < len(filters.order_ids):
            raise IndexError(
                f"Order index {index} outside order_ids of length {len(filters.order_ids)}"
            )
        return filters.order_ids[index]
    if filters.order_id_from is not None:
        return filters.order_id_from + index
    return index + 1


def _parse_omni_id(value: str, owner: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise InvalidCatalogEntryError(
            f"Non-numeric omni_id {value!r} in {owner}"
        ) from e


def build_product(coupon: Cpn, offer: CpnOffer, now: datetime) -> Product:
    """Build the product block of an order from a coupon and one of its offers."""
    return Product(
        id=_parse_omni_id(coupon.omni_id, f"CPN {coupon.id}"),
        cpn_id=coupon.id,
        conditions=coupon.conditions,
        use=coupon.use,
        partner=Partner(
            id=str(coupon.partner_omni_id),
            crm_id=coupon.partner_crm_id,
        ),
        offer=ProductOffer(
            id=_parse_omni_id(offer.omni_id, f"offer {offer.id} of CPN {coupon.id}"),
            cpn_id=offer.id,
            price=offer.price,
            promocodes=[
                Promocode(
                    text_code=PROMO_CODE_TEXT,
                    type=0,
                    pin=PROMO_CODE_PIN,
                    end_date_time=format_datetime(now + PROMO_CODE_TTL),
                )
            ],
        ),
    )


def synthesize_orders(
    filters: OrderFilters,
    coupon: Cpn,
    now: datetime,
    rng: random.Random,
) -> list[SynthesizedOrder]:
    """Fabricate the orders answering one request.

    Every order is built from the coupon's first offer and stamped with the
    same ``now``; client ids and reserve keys are drawn per order.

    Args:
        filters: Request filters
        coupon: Coupon selected for this request
        now: Generation time shared by all orders
        rng: Random source for client ids

    Returns:
        Orders in request order

    Raises:
        InvalidCatalogEntryError: If the coupon has no offers or a bad omni id
    """
    if not coupon.offers:
        raise InvalidCatalogEntryError(f"No offers found in CPN {coupon.id}")

    product = build_product(coupon, coupon.offers[0], now)
    created = format_datetime(now)

    return [
        SynthesizedOrder(
            client_id=str(rng.randrange(CLIENT_ID_UPPER)),
            order_number=determine_order_number(filters, index),
            status=STATUS_SUCCESS,
            rules=RULES_URL,
            channel=CHANNEL_WEB,
            agreement=True,
            payment_type=PAYMENT_TYPE_SPS_BONUSES,
            pay_datetime=created,
            promocodes_count=1,
            total_amount=TotalAmount(rub=TOTAL_AMOUNT_RUB),
            date_created=created,
            product_type=PRODUCT_TYPE_COUPON,
            combined_pdf_url=COMBINED_PDF_URL,
            reserve_key=str(uuid.uuid4()),
            product=product.model_copy(deep=True),
        )
        for index in range(determine_order_count(filters))
    ]
