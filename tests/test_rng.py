"""
test_rng.py
-----------

Unit tests for rng.py (RNG, get_rng, set_global_seed).
"""

import time
import threading

import pytest

import linework.rng as rng
from linework.rng import RNG
from linework.geometry import get_random_box


# ---------------------------------------------------------------------
# 1. Construction and repr
# ---------------------------------------------------------------------
def test_repr_names_backend(seeded_rng, np_rng):
  assert "backend=stdlib" in repr(seeded_rng)
  assert "backend=numpy" in repr(np_rng)
  assert np_rng.use_numpy and not seeded_rng.use_numpy


def test_reseed_changes_sequence(seeded_rng):
  vals1 = [seeded_rng.random() for _ in range(5)]
  seeded_rng.seed(999)
  vals2 = [seeded_rng.random() for _ in range(5)]
  assert vals1 != vals2


# ---------------------------------------------------------------------
# 2. Determinism
# ---------------------------------------------------------------------
@pytest.mark.parametrize("use_numpy", [False, True])
def test_same_seed_same_sequence(use_numpy):
  r1 = RNG(seed=42, use_numpy=use_numpy)
  r2 = RNG(seed=42, use_numpy=use_numpy)
  assert [r1.random() for _ in range(10)] == [r2.random() for _ in range(10)]


def test_seed_zero_is_a_real_seed():
  r1, r2 = RNG(seed=0), RNG(seed=0)
  assert r1.random() == r2.random()


def test_entropy_seeding_differs():
  r1 = RNG()
  time.sleep(0.002)
  r2 = RNG()
  assert [r1.random() for _ in range(3)] != [r2.random() for _ in range(3)]


def test_seed_in_place_restarts_stream(seeded_rng):
  seeded_rng.seed(7)
  first = [seeded_rng.random() for _ in range(3)]
  seeded_rng.seed(7)
  assert [seeded_rng.random() for _ in range(3)] == first


# ---------------------------------------------------------------------
# 3. Draws
# ---------------------------------------------------------------------
@pytest.mark.parametrize("use_numpy", [False, True])
def test_random_is_python_float_in_unit_interval(use_numpy):
  r = RNG(seed=5, use_numpy=use_numpy)
  for _ in range(500):
    u = r.random()
    assert isinstance(u, float) and 0.0 <= u < 1.0


@pytest.mark.parametrize("use_numpy", [False, True])
def test_both_backends_drive_the_generators(use_numpy):
  r = RNG(seed=8, use_numpy=use_numpy)
  points = get_random_box(10, 10, 10, rng=r)
  assert len(points) == 10
  assert all(isinstance(x, int) and isinstance(y, int) for x, y in points)


# ---------------------------------------------------------------------
# 4. Thread-safety
# ---------------------------------------------------------------------
def test_thread_safety_parallel_invocation():
  r = RNG(seed=999)
  results = []

  def worker():
    for _ in range(100):
      results.append(r.random())

  threads = [threading.Thread(target=worker) for _ in range(8)]
  [t.start() for t in threads]
  [t.join() for t in threads]

  assert len(results) == 800
  assert len(set(results)) > 1


# ---------------------------------------------------------------------
# 5. Global and thread-local accessors
# ---------------------------------------------------------------------
def test_get_rng_shared_and_threadlocal():
  global_rng = rng.get_rng()
  assert global_rng is rng.get_rng()
  t_rng_1 = rng.get_rng(thread_safe=True)
  t_rng_2 = rng.get_rng(thread_safe=True)
  assert t_rng_1 is t_rng_2
  assert global_rng is not t_rng_1


def test_threadlocal_differs_between_threads():
  seen = {}

  def worker():
    seen["other"] = rng.get_rng(thread_safe=True)

  t = threading.Thread(target=worker)
  t.start()
  t.join()
  assert seen["other"] is not rng.get_rng(thread_safe=True)


def test_set_global_seed_reproducible():
  rng.set_global_seed(321)
  a = [rng.get_rng().random() for _ in range(3)]
  rng.set_global_seed(321)
  b = [rng.get_rng().random() for _ in range(3)]
  assert a == b


@pytest.mark.parametrize("seed", ["5", 1.5, True, None])
def test_set_global_seed_rejects_non_int(seed):
  with pytest.raises(TypeError):
    rng.set_global_seed(seed)


# ---------------------------------------------------------------------
# 6. Performance sanity (quick smoke test)
# ---------------------------------------------------------------------
def test_perf_benchmark(benchmark):
  r = RNG(seed=111)
  result = benchmark(lambda: [r.random() for _ in range(1000)])
  assert len(result) == 1000
