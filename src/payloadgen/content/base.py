"""Base class for buffer content strategies."""

import random


class ContentStrategy:
    """Fills a fresh backing buffer for a sliding generator.

    Subclasses implement ``build``. The returned buffer must be at least
    ``target_len`` bytes long; it may be longer.
    """

    name = "base"

    def build(self, target_len: int, rng: random.Random) -> bytes:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
