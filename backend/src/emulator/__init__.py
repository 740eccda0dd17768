"""Coupon order emulator service."""

__version__ = "1.0.0"
