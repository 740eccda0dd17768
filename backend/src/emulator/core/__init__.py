from emulator.core.config import Settings, settings
from emulator.core.errors import (
    CatalogError,
    ConfigurationError,
    EmptyCatalogError,
    EmulatorError,
    InvalidCatalogEntryError,
)
from emulator.core.timefmt import WIRE_OFFSET, format_datetime

__all__ = [
    "Settings",
    "settings",
    "EmulatorError",
    "ConfigurationError",
    "CatalogError",
    "EmptyCatalogError",
    "InvalidCatalogEntryError",
    "WIRE_OFFSET",
    "format_datetime",
]
