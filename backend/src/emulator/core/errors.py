"""Exceptions raised by the order emulator."""


class EmulatorError(Exception):
    """Base class for all emulator failures."""


class ConfigurationError(EmulatorError):
    """Invalid delay bounds or an unusable catalog resource.

    Raised while the application starts, so the service never accepts traffic
    with a broken configuration.
    """


class CatalogError(EmulatorError):
    """Base class for coupon catalog problems surfaced per request."""


class EmptyCatalogError(CatalogError):
    """No coupons are available to select from."""


class InvalidCatalogEntryError(CatalogError):
    """A coupon has no offers or carries a non-numeric omni id."""
