"""Tests for content strategies and the strategy registry."""

import re

import pytest

from payloadgen.content import (
    ContentRegistry,
    ContentStrategy,
    LoremIpsum,
    RandomContent,
    TextContent,
    register_content,
)
from payloadgen.content.lorem import (
    MAX_PARAGRAPH_SENTENCES,
    MAX_SENTENCE_WORDS,
    MIN_PARAGRAPH_SENTENCES,
    MIN_SENTENCE_WORDS,
    WORDS,
)
from payloadgen.entropy import seeded_source


class TestContentRegistry:
    def test_builtin_strategies_registered(self):
        assert ContentRegistry.get("random") is RandomContent
        assert ContentRegistry.get("text") is TextContent

    def test_get_unknown_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown content strategy"):
            ContentRegistry.get("nonexistent_strategy_xyz")

    def test_available_returns_sorted_list(self):
        available = ContentRegistry.available()
        assert available == sorted(available)
        assert "random" in available
        assert "text" in available

    def test_decorator_registers_class(self):
        @register_content("_test_zeros")
        class ZeroContent(ContentStrategy):
            def build(self, target_len, rng):
                return b"\x00" * target_len

        try:
            assert ContentRegistry.get("_test_zeros") is ZeroContent
            assert ZeroContent().build(4, seeded_source(0)) == b"\x00\x00\x00\x00"
        finally:
            del ContentRegistry._strategies["_test_zeros"]

    def test_base_build_not_implemented(self):
        with pytest.raises(NotImplementedError):
            ContentStrategy().build(10, seeded_source(0))

    def test_create_returns_instance(self):
        strategy = ContentRegistry.create("text")
        assert isinstance(strategy, TextContent)
        assert strategy.name == "text"

    def test_decorator_sets_name(self):
        @register_content("_test_named")
        class Named(ContentStrategy):
            pass

        try:
            assert Named.name == "_test_named"
        finally:
            del ContentRegistry._strategies["_test_named"]

    def test_reregistering_same_class_is_allowed(self):
        ContentRegistry.register("random", RandomContent)
        assert ContentRegistry.get("random") is RandomContent

    def test_name_clash_rejected(self):
        class Impostor(ContentStrategy):
            pass

        with pytest.raises(ValueError, match="already registered to RandomContent"):
            ContentRegistry.register("random", Impostor)
        assert ContentRegistry.get("random") is RandomContent

    def test_non_strategy_rejected(self):
        class NotAStrategy:
            pass

        with pytest.raises(TypeError, match="not a ContentStrategy subclass"):
            ContentRegistry.register("_test_bad", NotAStrategy)
        assert "_test_bad" not in ContentRegistry.available()


class TestRandomContent:
    def test_exact_length(self):
        data = RandomContent().build(2048, seeded_source(1))
        assert isinstance(data, bytes)
        assert len(data) == 2048

    def test_deterministic_for_seed(self):
        strategy = RandomContent()
        assert strategy.build(64, seeded_source(5)) == strategy.build(64, seeded_source(5))

    def test_uses_full_byte_range(self):
        data = RandomContent().build(65536, seeded_source(2))
        assert len(set(data)) > 250


class TestLoremIpsum:
    def test_first_sentence_is_classic_opening(self):
        lorem = LoremIpsum(seeded_source(0))
        assert lorem.sentence().startswith("Lorem ipsum dolor sit amet, consectetur adipiscing elit")

    def test_only_first_sentence_uses_opening(self):
        lorem = LoremIpsum(seeded_source(0))
        lorem.sentence()
        # The opening phrase is fixed text; later sentences are random
        following = [lorem.sentence() for _ in range(20)]
        assert not all(s.startswith("Lorem ipsum dolor sit amet") for s in following)

    def test_sentence_shape(self):
        lorem = LoremIpsum(seeded_source(3))
        lorem.sentence()

        for _ in range(50):
            sentence = lorem.sentence()
            assert sentence[0].isupper()
            assert sentence.endswith(".")
            words = sentence[:-1].split(" ")
            assert MIN_SENTENCE_WORDS <= len(words) <= MAX_SENTENCE_WORDS
            for word in words:
                assert word.rstrip(",").lower() in WORDS

    def test_paragraph_sentence_count(self):
        lorem = LoremIpsum(seeded_source(4))

        for _ in range(20):
            paragraph = lorem.paragraph()
            count = paragraph.count(".")
            assert MIN_PARAGRAPH_SENTENCES <= count <= MAX_PARAGRAPH_SENTENCES
            assert "\n" not in paragraph

    def test_words(self):
        lorem = LoremIpsum(seeded_source(5))
        assert len(lorem.words(12).split(" ")) == 12
        assert lorem.word() in WORDS

    def test_paragraphs_joined_by_newline(self):
        lorem = LoremIpsum(seeded_source(6))
        assert lorem.paragraphs(3).count("\n") == 2


class TestTextContent:
    def test_reaches_target_length(self):
        data = TextContent().build(5000, seeded_source(7))
        assert len(data) >= 5000

    def test_overshoot_bounded_by_one_paragraph(self):
        data = TextContent().build(5000, seeded_source(8))
        paragraphs = data.decode("ascii").split("\n")

        # Trailing separator leaves an empty final element
        assert paragraphs[-1] == ""
        assert len(data) - len(paragraphs[-2]) - 1 < 5000

    def test_paragraphs_end_with_newline(self):
        data = TextContent().build(100, seeded_source(9))
        assert data.endswith(b"\n")

    def test_ascii_prose(self):
        data = TextContent().build(3000, seeded_source(10))
        text = data.decode("ascii")
        assert re.fullmatch(r"[A-Za-z ,.\n]+", text)
        assert text.startswith("Lorem ipsum")

    def test_fresh_lorem_per_build(self):
        strategy = TextContent()
        rng = seeded_source(11)

        first = strategy.build(200, rng)
        second = strategy.build(200, rng)

        assert first.startswith(b"Lorem ipsum dolor sit amet")
        assert second.startswith(b"Lorem ipsum dolor sit amet")
