"""Lorem ipsum text content.

``LoremIpsum`` produces pseudo-Latin prose from a fixed vocabulary. The
first sentence of every new generator opens with the classic
"Lorem ipsum dolor sit amet" phrase; everything after that is drawn at
random from the word list.
"""

import random

from .base import ContentStrategy
from .registry import register_content

WORDS = [
    "a", "ac", "accumsan", "ad", "adipiscing", "aenean", "aliquam", "aliquet",
    "amet", "ante", "aptent", "arcu", "at", "auctor", "augue", "bibendum",
    "blandit", "class", "commodo", "condimentum", "congue", "consectetur",
    "consequat", "conubia", "convallis", "cras", "cubilia", "curabitur",
    "curae", "cursus", "dapibus", "diam", "dictum", "dictumst", "dignissim",
    "dis", "dolor", "donec", "dui", "duis", "egestas", "eget", "eleifend",
    "elementum", "elit", "enim", "erat", "eros", "est", "et", "etiam", "eu",
    "euismod", "facilisi", "facilisis", "fames", "faucibus", "felis",
    "fermentum", "feugiat", "fringilla", "fusce", "gravida", "habitant",
    "habitasse", "hac", "hendrerit", "himenaeos", "iaculis", "id", "imperdiet",
    "in", "inceptos", "integer", "interdum", "ipsum", "justo", "lacinia",
    "lacus", "laoreet", "lectus", "leo", "libero", "ligula", "litora",
    "lobortis", "lorem", "luctus", "maecenas", "magna", "magnis", "malesuada",
    "massa", "mattis", "mauris", "metus", "mi", "molestie", "mollis", "montes",
    "morbi", "mus", "nam", "nascetur", "natoque", "nec", "neque", "netus",
    "nibh", "nisi", "nisl", "non", "nostra", "nulla", "nullam", "nunc", "odio",
    "orci", "ornare", "parturient", "pellentesque", "penatibus", "per",
    "pharetra", "phasellus", "placerat", "platea", "porta", "porttitor",
    "posuere", "potenti", "praesent", "pretium", "primis", "proin", "pulvinar",
    "purus", "quam", "quis", "quisque", "rhoncus", "ridiculus", "risus",
    "rutrum", "sagittis", "sapien", "scelerisque", "sed", "sem", "semper",
    "senectus", "sit", "sociis", "sociosqu", "sodales", "sollicitudin",
    "suscipit", "suspendisse", "taciti", "tellus", "tempor", "tempus",
    "tincidunt", "torquent", "tortor", "tristique", "turpis", "ullamcorper",
    "ultrices", "ultricies", "urna", "ut", "varius", "vehicula", "vel", "velit",
    "venenatis", "vestibulum", "vitae", "vivamus", "viverra", "volutpat",
    "vulputate",
]

OPENING = ["lorem", "ipsum", "dolor", "sit", "amet,", "consectetur", "adipiscing", "elit"]

MIN_SENTENCE_WORDS = 8
MAX_SENTENCE_WORDS = 15
MIN_PARAGRAPH_SENTENCES = 3
MAX_PARAGRAPH_SENTENCES = 7


class LoremIpsum:
    """Random lorem ipsum prose built from ``WORDS``."""

    def __init__(self, rng: random.Random):
        self._rng = rng
        self._first = True

    def word(self) -> str:
        return self._rng.choice(WORDS)

    def words(self, count: int) -> str:
        return " ".join(self.word() for _ in range(count))

    def sentence(self) -> str:
        """Generate one capitalized sentence ending with a period."""
        count = self._rng.randint(MIN_SENTENCE_WORDS, MAX_SENTENCE_WORDS)

        if self._first:
            self._first = False
            words = OPENING + [self.word() for _ in range(max(0, count - len(OPENING)))]
        else:
            words = [self.word() for _ in range(count)]
            # Optional comma somewhere in the middle
            if count > 4 and self._rng.random() < 0.5:
                pos = self._rng.randint(1, count - 3)
                words[pos] += ","

        text = " ".join(words)
        return text[0].upper() + text[1:] + "."

    def sentences(self, count: int) -> str:
        return " ".join(self.sentence() for _ in range(count))

    def paragraph(self) -> str:
        count = self._rng.randint(MIN_PARAGRAPH_SENTENCES, MAX_PARAGRAPH_SENTENCES)
        return self.sentences(count)

    def paragraphs(self, count: int) -> str:
        return "\n".join(self.paragraph() for _ in range(count))


@register_content("text")
class TextContent(ContentStrategy):
    """Concatenate lorem ipsum paragraphs until the target length is reached.

    Each paragraph is followed by a newline. The result overshoots
    ``target_len`` by up to one paragraph, so callers must slice against the
    actual buffer length.
    """

    name = "text"

    def build(self, target_len: int, rng: random.Random) -> bytes:
        lorem = LoremIpsum(rng)
        parts: list[str] = []
        length = 0
        while length < target_len:
            paragraph = lorem.paragraph()
            parts.append(paragraph)
            parts.append("\n")
            length += len(paragraph) + 1
        return "".join(parts).encode("ascii")
