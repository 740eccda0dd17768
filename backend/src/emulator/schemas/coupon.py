"""Coupon (CPN) catalog schemas."""

from pydantic import BaseModel


class CpnOffer(BaseModel):
    """Priced sub-item of a coupon."""

    id: int
    omni_id: str
    price: int

    model_config = {"frozen": True}


class Cpn(BaseModel):
    """Coupon definition loaded from the catalog resource."""

    id: int
    omni_id: str
    use: str
    conditions: str
    partner_omni_id: int
    partner_crm_id: str
    offers: tuple[CpnOffer, ...] = ()

    model_config = {"frozen": True}
