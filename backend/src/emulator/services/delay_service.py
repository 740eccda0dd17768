"""Random response delay emulation."""

import random

from emulator.core.config import Settings
from emulator.core.errors import ConfigurationError

MAX_DELAY_MS = 10_000


class DelayEmulator:
    """Samples response delays uniformly from a closed millisecond range.

    Bounds are validated once on construction; ``sample`` itself never fails.

    Args:
        min_delay_ms: Lower bound, inclusive
        max_delay_ms: Upper bound, inclusive
        rng: Random source, a fresh ``random.Random`` when omitted
    """

    def __init__(
        self,
        min_delay_ms: int,
        max_delay_ms: int,
        rng: random.Random | None = None,
    ):
        if min_delay_ms < 0:
            raise ConfigurationError("Minimum delay must not be negative")
        if max_delay_ms > MAX_DELAY_MS:
            raise ConfigurationError(
                f"Maximum delay must not exceed {MAX_DELAY_MS} ms"
            )
        if min_delay_ms > max_delay_ms:
            raise ConfigurationError(
                f"Minimum delay {min_delay_ms} ms exceeds maximum {max_delay_ms} ms"
            )
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DelayEmulator":
        return cls(settings.DELAY_MIN_MS, settings.DELAY_MAX_MS)

    def sample(self, rng: random.Random | None = None) -> int:
        """Return a delay in milliseconds within ``[min_delay_ms, max_delay_ms]``."""
        return (rng or self.rng).randint(self.min_delay_ms, self.max_delay_ms)
