"""Sliding buffer payload generator.

The generator keeps a buffer of ``size + TAIL_SIZE`` bytes and returns
slices with an increasing offset, so every call yields a different set of
bytes without rebuilding the whole buffer::

    [<----------size----------><-tail->]
    [<----------slice0-------->........]
    [.<----------slice1-------->.......]
    [..<----------slice2-------->......]

Once the next slice would run past the end of the buffer, the buffer is
dropped and rebuilt from scratch on the following call.
"""

import hashlib
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum

from payloadgen.content import ContentRegistry, ContentStrategy
from payloadgen.entropy import default_source
from payloadgen.metrics import GeneratorMetrics

logger = logging.getLogger(__name__)

# Number of extra bytes kept in the buffer tail for sliding
TAIL_SIZE = 1024


class PayloadError(Exception):
    """Base error for payload generation."""


class InvalidSizeError(PayloadError, ValueError):
    """Requested payload size is not a positive integer."""


class PayloadKind(str, Enum):
    """Content kinds understood by the generator."""

    TEXT = "text"
    RANDOM = "random"
    UNSPECIFIED = ""

    @property
    def strategy_name(self) -> str:
        """Name of the content strategy backing this kind."""
        if self is PayloadKind.TEXT:
            return "text"
        return "random"


class GeneratorState(str, Enum):
    """Buffer lifecycle state."""

    EMPTY = "empty"
    FILLED = "filled"


@dataclass(frozen=True)
class Payload:
    """A generated payload and its optional SHA-256 hex digest."""

    data: bytes
    hash: str = ""

    @property
    def size(self) -> int:
        return len(self.data)

    def __iter__(self):
        # Allows ``data, digest = generator.generate_payload(True)``
        yield self.data
        yield self.hash


def resolve_kind(value: "PayloadKind | str | None") -> tuple[PayloadKind, bool]:
    """Map a user-supplied kind to a ``PayloadKind``.

    Args:
        value: Kind name, ``PayloadKind`` member, or None

    Returns:
        Tuple of (kind, recognized). Unrecognized values resolve to
        ``PayloadKind.UNSPECIFIED`` with ``recognized`` set to False.
    """
    if isinstance(value, PayloadKind):
        return value, True
    if value is None:
        return PayloadKind.UNSPECIFIED, True
    try:
        return PayloadKind(value), True
    except ValueError:
        return PayloadKind.UNSPECIFIED, False


class SlidingBufferGenerator:
    """Produces fixed-size payloads from a lazily built sliding buffer.

    A generator belongs to a single caller and is not safe for concurrent
    use. Separate generators share nothing except the random source.
    """

    def __init__(
        self,
        size: int,
        kind: "PayloadKind | str | None" = PayloadKind.UNSPECIFIED,
        *,
        rng: random.Random | None = None,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        """
        Initialize generator.

        Args:
            size: Size of every returned payload in bytes, must be positive
            kind: Content kind ("text", "random" or ""). Unknown kinds fall
                back to random content.
            rng: Random source. Defaults to the process-wide source.
            log: Logger for diagnostics. Defaults to this module's logger.

        Raises:
            InvalidSizeError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidSizeError(f"size should be positive, got {size!r}")

        self._log = log if log is not None else logger

        resolved, recognized = resolve_kind(kind)
        if not recognized:
            self._log.info("Unknown payload type %r, random will be used.", kind)

        self._size = size
        self._kind = resolved
        self._rng = rng if rng is not None else default_source()
        self._strategy: ContentStrategy = ContentRegistry.create(resolved.strategy_name)
        self._buffer = b""
        self._offset = 0
        self._state = GeneratorState.EMPTY
        self.metrics = GeneratorMetrics()

    @property
    def size(self) -> int:
        return self._size

    @property
    def kind(self) -> PayloadKind:
        return self._kind

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def buffer_length(self) -> int:
        """Length of the current buffer, 0 when no buffer is held."""
        if self._state is GeneratorState.EMPTY:
            return 0
        return len(self._buffer)

    def next_slice(self) -> bytes:
        """Return the next ``size`` bytes and advance the offset by one."""
        if self._state is GeneratorState.EMPTY:
            self._fill()

        result = self._buffer[self._offset : self._offset + self._size]

        # Shift the offset for the next call. Once the tail is used up, drop
        # the buffer so the next call builds a new one.
        self._offset += 1
        if self._offset + self._size > len(self._buffer):
            self.reset()

        self.metrics.record_slice(len(result))
        return result

    def generate_payload(self, calc_hash: bool = False) -> Payload:
        """Return the next payload, hashed with SHA-256 when requested.

        Args:
            calc_hash: Compute the lowercase hex SHA-256 digest of the payload

        Returns:
            Payload with data and hash ("" when calc_hash is False)
        """
        data = self.next_slice()

        digest = ""
        if calc_hash:
            digest = hashlib.sha256(data).hexdigest()
            self.metrics.record_hash()

        return Payload(data=data, hash=digest)

    def reset(self) -> None:
        """Drop the buffer so the next call rebuilds it."""
        self._buffer = b""
        self._offset = 0
        self._state = GeneratorState.EMPTY

    def _fill(self) -> None:
        start = time.perf_counter()
        buffer = self._strategy.build(self._size + TAIL_SIZE, self._rng)
        self.metrics.record_build(time.perf_counter() - start)

        if len(buffer) < self._size + TAIL_SIZE:
            raise PayloadError(
                f"{self._strategy!r} built {len(buffer)} bytes, "
                f"need at least {self._size + TAIL_SIZE}"
            )

        self._buffer = buffer
        self._offset = 0
        self._state = GeneratorState.FILLED

    def __repr__(self) -> str:
        return (
            f"SlidingBufferGenerator(size={self._size}, kind={self._kind.value!r}, "
            f"state={self._state.value}, offset={self._offset})"
        )
