"""
-------
conftest.py
-------
Shared pytest fixtures for linework tests.
"""

import logging
import itertools

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for CI

from linework.rng import RNG


class FixedSource:
  """Uniform source replaying the given values in a loop."""

  def __init__(self, *values):
    self.values = values
    self._it = itertools.cycle(values)
    self.calls = 0

  def random(self):
    self.calls += 1
    return next(self._it)


# -----------------------------------------------------------------------------
# Random sources
# -----------------------------------------------------------------------------
@pytest.fixture
def seeded_rng():
  """Deterministic stdlib-backed RNG."""
  return RNG(seed=123)


@pytest.fixture
def np_rng():
  """Deterministic NumPy-backed RNG."""
  return RNG(seed=42, use_numpy=True)


@pytest.fixture
def fixed():
  """Factory for FixedSource instances: fixed(0.5) always yields 0.5."""
  return FixedSource


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
@pytest.fixture
def clean_logger():
  """Drop handlers and level set on the "linework" logger during a test."""
  logger = logging.getLogger("linework")
  yield logger
  for h in list(logger.handlers):
    logger.removeHandler(h)
    h.close()
  logger.setLevel(logging.NOTSET)
