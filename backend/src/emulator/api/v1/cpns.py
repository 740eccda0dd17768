"""Coupon catalog API endpoints."""

from fastapi import APIRouter

from emulator.api.deps import CatalogDep
from emulator.schemas.coupon import Cpn

router = APIRouter()


@router.get("/cpns", response_model=list[Cpn])
async def get_all_cpns(catalog: CatalogDep):
    """Get every coupon in the loaded catalog."""
    return catalog.all()
