"""Per-virtual-user generator factory.

A load test creates one ``DatagenModule`` for the whole run and calls
``new_instance`` once per virtual user. Each ``VirtualUser`` hands out its
own generators, all drawing from the module's random source, so no
generator is ever shared between users.
"""

import logging
import random

from payloadgen.entropy import default_source
from payloadgen.generator import PayloadKind, SlidingBufferGenerator
from payloadgen.log import FieldLogger

logger = logging.getLogger(__name__)


class VirtualUser:
    """Generator and logger handle for one virtual user."""

    def __init__(self, vu_id: int, rng: random.Random, base_logger: logging.Logger):
        self.vu_id = vu_id
        self._rng = rng
        self._log = FieldLogger(base_logger, {"vu": vu_id})
        self.generators: list[SlidingBufferGenerator] = []

    def generator(
        self, size: int, kind: PayloadKind | str | None = PayloadKind.UNSPECIFIED
    ) -> SlidingBufferGenerator:
        """Create a generator owned by this virtual user.

        Args:
            size: Payload size in bytes
            kind: Content kind ("text", "random" or "")

        Returns:
            A new SlidingBufferGenerator

        Raises:
            InvalidSizeError: If size is not positive
        """
        gen = SlidingBufferGenerator(size, kind, rng=self._rng, log=self._log)
        self.generators.append(gen)
        return gen

    def logger(self) -> FieldLogger:
        """Return a field logger tagged with this virtual user's id."""
        return self._log

    def __repr__(self) -> str:
        return f"VirtualUser(vu_id={self.vu_id}, generators={len(self.generators)})"


class DatagenModule:
    """Root object shared by every virtual user of a test run."""

    def __init__(
        self,
        rng: random.Random | None = None,
        base_logger: logging.Logger | None = None,
    ):
        self.rng = rng if rng is not None else default_source()
        self.base_logger = base_logger if base_logger is not None else logger
        self._instances: dict[int, VirtualUser] = {}

    def new_instance(self, vu_id: int) -> VirtualUser:
        """Create the handle for virtual user *vu_id*.

        Raises:
            ValueError: If an instance for this id already exists
        """
        if vu_id in self._instances:
            raise ValueError(f"Virtual user {vu_id} already has an instance")

        instance = VirtualUser(vu_id, self.rng, self.base_logger)
        self._instances[vu_id] = instance
        logger.debug("Created instance for virtual user %d", vu_id)
        return instance

    def get_instance(self, vu_id: int) -> VirtualUser | None:
        return self._instances.get(vu_id)

    @property
    def instances(self) -> list[VirtualUser]:
        return list(self._instances.values())
