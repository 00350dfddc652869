"""
Observers for benchmark progress.

A job calls its suite at each phase boundary. ``Suite`` implements every
callback as a no-op so subclasses only override what they need.
"""

import logging
from typing import Any, List, Optional

from ipsbench.report import IPSReport


class Suite:
    """
    Base observer.

    Attributes:
        quiet: When True, jobs driven through ``ips()`` suppress console output
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def warming(self, label: str, warmup: float):
        """Called before an entry is calibrated."""

    def warmup_stats(self, warmup_time_us: float, cycles: int):
        """Called after an entry is calibrated."""

    def running(self, label: str, time: float):
        """Called before an entry is measured."""

    def add_report(self, report: IPSReport, context: Any = None):
        """Called with each finished report and the caller's context value."""


class LoggingSuite(Suite):
    """
    Suite that logs every callback and keeps the reports it receives.

    Examples:
        >>> suite = LoggingSuite()
        >>> job = IPSJob(suite=suite, quiet=True)
        >>> ...
        >>> suite.reports[0].ips
    """

    def __init__(self, logger: Optional[logging.Logger] = None, quiet: bool = False):
        super().__init__(quiet=quiet)
        self.logger = logger or logging.getLogger(__name__)
        self.reports: List[IPSReport] = []
        self.contexts: List[Any] = []

    def warming(self, label: str, warmup: float):
        self.logger.info(f"Warming up {label!r} for {warmup}s")

    def warmup_stats(self, warmup_time_us: float, cycles: int):
        self.logger.info(f"Warmup took {warmup_time_us:.0f}us, {cycles} i/100ms")

    def running(self, label: str, time: float):
        self.logger.info(f"Running {label!r} for {time}s")

    def add_report(self, report: IPSReport, context: Any = None):
        self.reports.append(report)
        self.contexts.append(context)
        self.logger.info(f"{report.label}: {report.body.strip()}")
