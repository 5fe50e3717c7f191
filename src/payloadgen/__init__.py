"""Payloadgen - Sliding-window payload generator for load-testing workloads.

Payloadgen hands out byte payloads of a fixed size, optionally with a
SHA-256 hash, without regenerating random or text content on every call.

Key modules:

- :mod:`payloadgen.generator` - Sliding buffer generator and payload type
- :mod:`payloadgen.content` - Content strategies (random bytes, lorem ipsum text)
- :mod:`payloadgen.entropy` - Process-wide pseudo-random source
- :mod:`payloadgen.session` - Per-virtual-user generator factory
- :mod:`payloadgen.log` - Field-decorating logger and logging setup
- :mod:`payloadgen.config` - YAML configuration
- :mod:`payloadgen.cli` - Command line interface
"""

__version__ = "0.1.0"
