"""
Pytest configuration and fixtures.
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ipsbench import IPSJob, Suite


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingSuite(Suite):
    """Suite that records every callback in order."""

    def __init__(self, quiet: bool = False):
        super().__init__(quiet=quiet)
        self.events = []

    def warming(self, label, warmup):
        self.events.append(('warming', label, warmup))

    def warmup_stats(self, warmup_time_us, cycles):
        self.events.append(('warmup_stats', warmup_time_us, cycles))

    def running(self, label, time):
        self.events.append(('running', label, time))

    def add_report(self, report, context=None):
        self.events.append(('add_report', report, context))


@pytest.fixture
def fake_clock():
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def recording_suite():
    """Suite recording callbacks."""
    return RecordingSuite()


@pytest.fixture
def fake_job(fake_clock):
    """Quiet job driven by the fake clock with a no-op environment hook."""
    return IPSJob(quiet=True, clock=fake_clock, clean_env=lambda: None)
