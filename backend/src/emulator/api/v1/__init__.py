"""API v1 routers."""

from emulator.api.v1 import cpns, emulate, orders

__all__ = ["cpns", "emulate", "orders"]
