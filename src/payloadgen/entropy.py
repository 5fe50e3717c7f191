"""Process-wide pseudo-random source shared by all generators.

The source is seeded once from the clock when this module is imported.
Generators draw from it independently and never reseed it. It is not
suitable for anything security related.
"""

import random
import time

SOURCE = random.Random(time.time_ns())


def default_source() -> random.Random:
    """Return the shared process-wide random source."""
    return SOURCE


def seeded_source(seed: int) -> random.Random:
    """Create an independent deterministic source.

    Args:
        seed: Seed value

    Returns:
        A new ``random.Random`` that yields the same sequence for the same seed
    """
    return random.Random(seed)
