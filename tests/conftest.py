"""
Shared pytest fixtures for the bank queue simulator tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from bank_queue.distributions import make_rng
from bank_queue.system import bank_simulation


@pytest.fixture
def rng():
    """A generator with a fixed seed so statistical tests are repeatable."""
    return make_rng(12345)


@pytest.fixture
def test_output_dir(request, tmp_path):
    """Per-test directory for files written by CLI and plotting tests."""
    test_dir = tmp_path / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def scripted_run(monkeypatch):
    """
    Replace the random samplers used by the simulation clock with scripted ones.

    Usage:
        scripted_run({0: 3, 5: 1}, service_time=2)

    The mapping gives the number of arrivals for each horizon minute (missing
    minutes get none) and every service takes `service_time` minutes.
    """
    def install(arrivals_by_minute, service_time=2):
        calls = {'minute': 0}

        def fake_arrivals(rate, rng):
            count = arrivals_by_minute.get(calls['minute'], 0)
            calls['minute'] += 1
            return count

        monkeypatch.setattr(bank_simulation, 'sample_arrivals', fake_arrivals)
        monkeypatch.setattr(bank_simulation, 'sample_service_time',
                            lambda rng: service_time)

    return install
