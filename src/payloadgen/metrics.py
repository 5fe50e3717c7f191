"""Runtime counters for a sliding buffer generator."""

from dataclasses import dataclass
from typing import Any


@dataclass
class GeneratorMetrics:
    """Tracks how a generator has been used."""

    slices: int = 0
    rebuilds: int = 0
    bytes_served: int = 0
    hashes: int = 0
    build_seconds: float = 0.0

    def record_build(self, seconds: float) -> None:
        """Record a buffer (re)build and the time it took."""
        self.rebuilds += 1
        self.build_seconds += seconds

    def record_slice(self, size: int) -> None:
        self.slices += 1
        self.bytes_served += size

    def record_hash(self) -> None:
        self.hashes += 1

    @property
    def slices_per_rebuild(self) -> float:
        """Average number of slices served from one buffer."""
        if self.rebuilds == 0:
            return 0.0
        return self.slices / self.rebuilds

    def to_dict(self) -> dict[str, Any]:
        return {
            "slices": self.slices,
            "rebuilds": self.rebuilds,
            "bytes_served": self.bytes_served,
            "hashes": self.hashes,
            "build_seconds": round(self.build_seconds, 6),
            "slices_per_rebuild": round(self.slices_per_rebuild, 2),
        }
