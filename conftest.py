"""Shared pytest fixtures."""

import logging
import random

import pytest


@pytest.fixture
def seeded_rng():
    """Deterministic standard generator"""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def reset_epoch_logging():
    """Keep handlers installed by configure_logging from leaking across tests"""
    yield
    for name in ("epoch", "epoch_core"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
