"""Order schemas for request/response validation.

Field declaration order is the JSON key order on the wire.
"""

from pydantic import BaseModel, Field


class OrderFilters(BaseModel):
    """Filters sent by the caller and echoed back in the response."""

    limit: int | None = Field(default=None, ge=0)
    product_type: str | None = None
    order_id_from: int | None = None
    order_ids: list[int] | None = None


class OrderRequestStats(BaseModel):
    coupon: int | None = None


class OrderRequest(BaseModel):
    """Schema for the order listing request body."""

    filters: OrderFilters = Field(default_factory=OrderFilters)
    stats: OrderRequestStats | None = None


class Promocode(BaseModel):
    text_code: str
    qr_code: str | None = None
    bar_code: str | None = None
    pdf_url: str | None = None
    type: int
    pin: int
    end_date_time: str | None


class ProductOffer(BaseModel):
    id: int
    cpn_id: int
    price: int
    promocodes: list[Promocode]


class Partner(BaseModel):
    id: str
    crm_id: str


class Product(BaseModel):
    """Product block derived from the selected coupon and its offer."""

    id: int
    cpn_id: int
    conditions: str
    use: str
    partner: Partner
    offer: ProductOffer


class TotalAmount(BaseModel):
    bon: int | None = Field(default=None, alias="BON")
    rub: int | None = Field(default=None, alias="RUB")

    model_config = {"populate_by_name": True}


class SynthesizedOrder(BaseModel):
    """Schema for one fabricated order."""

    client_id: str
    order_id_sbol: str | None = None
    order_number: int
    order_external_id: str | None = None
    status: str
    rules: str
    channel: str
    client_os: str | None = Field(default=None, alias="clientOS")
    agreement: bool
    payment_type: str
    pay_datetime: str | None
    promocodes_count: int
    total_amount: TotalAmount
    date_created: str | None
    product_type: str
    combined_pdf_url: str
    reserve_key: str
    product: Product

    model_config = {"populate_by_name": True}


class LastOrder(BaseModel):
    order_id: int | None = None
    date_created: str | None = None


class CouponStats(BaseModel):
    last_order: LastOrder = Field(alias="lastOrder")

    model_config = {"populate_by_name": True}


class OrderStats(BaseModel):
    coupon: CouponStats


class OrderResponseData(BaseModel):
    filters: OrderFilters
    stats: OrderStats
    timestamp: str | None
    orders: list[SynthesizedOrder]


class OrderResponse(BaseModel):
    """Schema for the order listing response envelope."""

    status: str
    messages: list[str] = Field(default_factory=list)
    data: OrderResponseData | None = None


class EmulatedResponse(BaseModel):
    """Schema for the generic delayed response."""

    timestamp: int
    status: str
    message: str
