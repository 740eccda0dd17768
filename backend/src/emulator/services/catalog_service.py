"""Coupon catalog loading and selection."""

import logging
import random
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from emulator.core.errors import ConfigurationError, EmptyCatalogError
from emulator.schemas.coupon import Cpn

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "cpn-list.json"

_cpn_list_adapter = TypeAdapter(list[Cpn])


class CouponCatalog:
    """Immutable in-memory pool of coupons.

    Loaded once at startup and shared read-only between requests.
    """

    def __init__(self, coupons: Iterable[Cpn] = ()):
        self._coupons: tuple[Cpn, ...] = tuple(coupons)

    def __len__(self) -> int:
        return len(self._coupons)

    def __iter__(self) -> Iterator[Cpn]:
        return iter(self._coupons)

    def __getitem__(self, index: int) -> Cpn:
        return self._coupons[index]

    def all(self) -> list[Cpn]:
        return list(self._coupons)


def load_catalog(path: str | Path | None = None) -> CouponCatalog:
    """Load the coupon catalog from a JSON array file.

    Args:
        path: Catalog file, the packaged default when None

    Returns:
        Loaded catalog (may be empty)

    Raises:
        ConfigurationError: If the file is missing or does not match the Cpn shape
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        raw = catalog_path.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read coupon catalog {catalog_path}: {e}") from e

    try:
        coupons = _cpn_list_adapter.validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid coupon catalog {catalog_path}: {e}") from e

    logger.info(f"Loaded {len(coupons)} CPNs from {catalog_path}")
    return CouponCatalog(coupons)


def select_coupon(catalog: CouponCatalog, rng: random.Random) -> Cpn:
    """Pick one coupon with a uniform random index.

    Raises:
        EmptyCatalogError: If the catalog holds no coupons
    """
    if len(catalog) == 0:
        raise EmptyCatalogError("Coupon catalog is empty")
    return catalog[rng.randrange(len(catalog))]
