"""
ipsbench - iterations-per-second benchmarking

Measures the throughput of small units of work in two phases:
- Calibration: find a batch size that runs in about 100ms
- Measurement: time batches of that size for a fixed duration and report
  the mean and standard deviation of per-batch throughput
"""

__version__ = "0.1.0"

from typing import Any, Callable, List, Optional

from ipsbench.action import (
    InvocationMode,
    Action,
    CompiledSnippet,
    SingleIterationCallable,
    BatchedCallable,
    Entry,
    make_action
)
from ipsbench.exceptions import ConfigurationError, SequencingError
from ipsbench.report import IPSReport
from ipsbench.job import IPSJob
from ipsbench.suite import Suite, LoggingSuite
from ipsbench.compare import compare


def ips(
    setup: Callable[[IPSJob], Any],
    time: Optional[float] = None,
    warmup: Optional[float] = None,
    quiet: bool = False,
    suite: Optional[Suite] = None,
    context: Any = None
) -> List[IPSReport]:
    """
    Build, run and optionally compare a benchmark job.

    Args:
        setup: Called with the new job to register entries
        time: Measurement seconds per entry (default: job default)
        warmup: Calibration seconds per entry (default: job default)
        quiet: Suppress console output
        suite: Optional observer; ``suite.quiet`` also suppresses output
        context: Forwarded to ``suite.add_report``

    Returns:
        Reports in registration order

    Examples:
        >>> def setup(x):
        ...     x.register("upper", action=lambda: "abc".upper())
        ...     x.register("snippet", code="'abc'.upper()")
        ...     x.enable_compare()
        >>> reports = ips(setup, time=1, warmup=0.5)
    """
    quiet = quiet or bool(suite is not None and suite.quiet)

    job = IPSJob(suite=suite, quiet=quiet)
    job.configure(warmup=warmup, time=time)

    setup(job)

    reports = job.run(context=context)

    if job.compare_enabled and not quiet:
        compare(*reports)

    return reports


__all__ = [
    'ips',
    'IPSJob',
    'IPSReport',
    'InvocationMode',
    'Action',
    'CompiledSnippet',
    'SingleIterationCallable',
    'BatchedCallable',
    'Entry',
    'make_action',
    'ConfigurationError',
    'SequencingError',
    'Suite',
    'LoggingSuite',
    'compare',
]
