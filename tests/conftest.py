"""Pytest configuration and shared fixtures."""

import logging
import random

import pytest

from payloadgen.config.schema import PayloadgenConfig
from payloadgen.entropy import seeded_source
from payloadgen.log import ROOT_LOGGER_NAME


@pytest.fixture
def rng() -> random.Random:
    """Provide a deterministic random source."""
    return seeded_source(1234)


@pytest.fixture
def default_config() -> PayloadgenConfig:
    """Provide a default configuration for tests."""
    return PayloadgenConfig()


@pytest.fixture
def custom_config() -> PayloadgenConfig:
    """Provide a custom configuration for tests."""
    config = PayloadgenConfig()
    config.payload.size = 64
    config.payload.kind = "text"
    config.payload.hash = True
    config.payload.count = 3
    return config


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers that configure_logging installed during a test."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
