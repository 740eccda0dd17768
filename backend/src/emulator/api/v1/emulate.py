"""Generic delayed response endpoint."""

from fastapi import APIRouter

from emulator.api.deps import OrderResponseServiceDep
from emulator.schemas.order import EmulatedResponse

router = APIRouter()


@router.get("/emulate", response_model=EmulatedResponse)
async def get_emulated_response(service: OrderResponseServiceDep):
    return await service.generate_emulated_response()
