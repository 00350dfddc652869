"""
Side-by-side comparison of reports from one run.
"""

import sys
from typing import List, Optional, TextIO, Tuple

from ipsbench.report import IPSReport


def compare(*reports: IPSReport, stream: Optional[TextIO] = None) -> List[Tuple[IPSReport, float]]:
    """
    Print reports fastest first with each one's slowdown against the fastest.

    Args:
        *reports: Reports to compare
        stream: Output stream (default: stdout)

    Returns:
        List of (report, slowdown) pairs, fastest first. Empty when fewer
        than two reports are given.
    """
    if len(reports) < 2:
        return []

    out = stream if stream is not None else sys.stdout

    ranked = sorted(reports, key=lambda r: r.ips, reverse=True)
    best = ranked[0]

    results = [(best, 1.0)]
    out.write("\nComparison:\n")
    out.write("%20s: %10.1f i/s\n" % (best.label, best.ips))

    for report in ranked[1:]:
        slowdown = best.ips / report.ips if report.ips > 0 else float('inf')
        results.append((report, slowdown))
        out.write("%20s: %10.1f i/s - %.2fx slower\n" % (report.label, report.ips, slowdown))

    out.write("\n")
    return results
