"""
Virtual Users Example
=====================

This example simulates a small load test with payloadgen.
Each virtual user:
- Gets its own generator from a shared DatagenModule
- Produces payloads with SHA-256 hashes
- Logs progress with its own vu field

Prerequisites:
- payloadgen installed: pip install -e .

Usage:
    python examples/01_virtual_users.py
"""

from payloadgen.log import configure_logging
from payloadgen.session import DatagenModule

VIRTUAL_USERS = 4
ITERATIONS = 2000


def main():
    """Run a few virtual users against their own generators."""
    configure_logging("INFO", "text")

    # 1. One module per test run
    module = DatagenModule()

    # 2. One instance and generator per virtual user
    users = [module.new_instance(vu_id) for vu_id in range(1, VIRTUAL_USERS + 1)]
    kinds = ["random", "text"]

    for vu in users:
        gen = vu.generator(4096, kinds[vu.vu_id % len(kinds)])
        log = vu.logger().with_fields({"kind": gen.kind.value})

        # 3. Generate payloads as a load-test iteration would
        for iteration in range(ITERATIONS):
            payload = gen.generate_payload(calc_hash=iteration % 100 == 0)
            if payload.hash:
                log.with_field("iteration", iteration).debug("hash %s", payload.hash)

        log.info("finished: %s", gen.metrics.to_dict())


if __name__ == "__main__":
    main()
