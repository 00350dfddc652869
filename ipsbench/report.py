"""
Per-entry benchmark report.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from ipsbench.action import LABEL_WIDTH


@dataclass(frozen=True)
class IPSReport:
    """
    Result of measuring one entry.

    Attributes:
        label: Entry label
        microseconds: Total measured time across retained batches
        iterations: Total iterations across retained batches
        ips: Mean iterations per second over per-batch samples
        ips_sd: Standard deviation of per-batch iterations per second (rounded)
        cycles: Batch size used during measurement
    """
    label: str
    microseconds: float
    iterations: int
    ips: float
    ips_sd: int
    cycles: int

    @property
    def seconds(self) -> float:
        """Total measured time in seconds."""
        return self.microseconds / 1_000_000.0

    @property
    def stddev_percentage(self) -> float:
        """Standard deviation as a percentage of the mean ips."""
        if self.ips == 0:
            return 0.0
        return 100.0 * (self.ips_sd / self.ips)

    @property
    def header(self) -> str:
        return self.label.rjust(LABEL_WIDTH)

    @property
    def body(self) -> str:
        """Summary line: mean ips, relative stddev, iterations and runtime."""
        left = "%10.1f (±%.1f%%) i/s" % (self.ips, self.stddev_percentage)
        return left.ljust(20) + (" - %10d in %10.6fs" % (self.iterations, self.seconds))

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        data = asdict(self)
        data['stddev_percentage'] = self.stddev_percentage
        return data

    def __str__(self):
        return f"{self.header} {self.body}"
