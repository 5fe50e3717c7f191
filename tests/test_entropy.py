"""Tests for the shared random source."""

import random

from payloadgen import entropy
from payloadgen.entropy import default_source, seeded_source


def test_default_source_is_shared():
    assert default_source() is default_source()
    assert default_source() is entropy.SOURCE
    assert isinstance(default_source(), random.Random)


def test_seeded_sources_are_independent():
    a = seeded_source(42)
    b = seeded_source(42)

    assert a is not b
    assert a.randbytes(32) == b.randbytes(32)


def test_seeded_source_does_not_touch_default():
    state = default_source().getstate()
    seeded_source(1).randbytes(16)

    assert default_source().getstate() == state


def test_generators_share_default_source():
    from payloadgen.generator import SlidingBufferGenerator

    gen = SlidingBufferGenerator(8)
    assert gen._rng is default_source()
