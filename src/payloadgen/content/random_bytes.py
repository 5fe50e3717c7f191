"""Pseudo-random byte content."""

import random

from .base import ContentStrategy
from .registry import register_content


@register_content("random")
class RandomContent(ContentStrategy):
    """Fill the buffer with bytes from a non-cryptographic random source."""

    name = "random"

    def build(self, target_len: int, rng: random.Random) -> bytes:
        return rng.randbytes(target_len)
