"""Content strategies used to fill generator buffers.

Importing this package registers the built-in strategies:

- ``random`` - pseudo-random bytes
- ``text`` - lorem ipsum paragraphs separated by newlines
"""

from .base import ContentStrategy
from .lorem import LoremIpsum, TextContent
from .random_bytes import RandomContent
from .registry import ContentRegistry, register_content

__all__ = [
    "ContentRegistry",
    "ContentStrategy",
    "LoremIpsum",
    "RandomContent",
    "TextContent",
    "register_content",
]
