"""
rng.py
------

Injectable random source shared by the linework generators.

- Wraps either `random.Random` (default) or `numpy.random.Generator`.
- Every draw goes through a lock, so one instance can be shared by threads.
- `random()` is the single "next uniform value" operation the generators
  depend on; anything exposing it can be passed as `rng=`.
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Integral
from typing import Optional, TypeAlias, Union

import numpy as np

RNGBackend: TypeAlias = Union[random.Random, np.random.Generator]


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Thread-safe random source.

    Attributes:
        _rng:  Backend generator (random.Random or numpy.random.Generator).
        _lock: threading.Lock guarding every draw.

    Notes:
        - An explicit `seed` gives a reproducible stream; `None` seeds from
          PID, clock and the interpreter's own entropy.
        - The NumPy backend draws the same distributions but a different
          stream than the stdlib backend for the same seed.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        self._rng: RNGBackend = self._make_backend(seed)

    def _make_backend(self, seed: Optional[int]) -> RNGBackend:
        seed_val = _entropy_seed() if seed is None else seed
        if self._use_numpy:
            return np.random.default_rng(seed_val)
        return random.Random(seed_val)

    @property
    def use_numpy(self) -> bool:
        return self._use_numpy

    # -----------------------------------------------------------------
    # Seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the stream in place (preserves object identity)."""
        with self._lock:
            self._rng = self._make_backend(seed)

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def random(self) -> float:
        """Next uniform value in [0, 1)."""
        with self._lock:
            return float(self._rng.random())

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return the shared RNG, or a per-thread one when `thread_safe` is set."""
    if thread_safe:
        if not hasattr(_thread_local, "rng"):
            _thread_local.rng = RNG(use_numpy=use_numpy)
        return _thread_local.rng
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the shared RNG."""
    if not isinstance(seed, Integral) or isinstance(seed, bool):
        raise TypeError(f"seed must be an int, not {type(seed).__name__}")
    _global_rng.seed(int(seed))
