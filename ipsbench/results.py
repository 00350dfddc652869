"""
Report export and summary tables.
"""

import csv
import json
import os
from typing import Any, Dict, List, Sequence

from ipsbench.report import IPSReport


FIELDNAMES = [
    'label',
    'ips',
    'ips_sd',
    'stddev_percentage',
    'iterations',
    'microseconds',
    'cycles',
]


def reports_to_dicts(reports: Sequence[IPSReport]) -> List[Dict[str, Any]]:
    """Convert reports to a list of dictionaries, preserving order."""
    return [r.to_dict() for r in reports]


def generate_summary_table(reports: Sequence[IPSReport]) -> str:
    """
    Generate a fixed-width summary table.

    Args:
        reports: Reports to tabulate

    Returns:
        Formatted table string
    """
    lines = []
    lines.append("Benchmark Results")
    lines.append("=" * 80)
    lines.append(f"{'Label':<24} {'i/s':>14} {'±%':>8} {'Iterations':>12} {'Batch':>10}")
    lines.append("-" * 80)

    for r in reports:
        lines.append(
            f"{r.label:<24} "
            f"{r.ips:>14.1f} "
            f"{r.stddev_percentage:>7.1f}% "
            f"{r.iterations:>12d} "
            f"{r.cycles:>10d}"
        )

    lines.append("=" * 80)

    return "\n".join(lines)


def export_reports(reports: Sequence[IPSReport], output_path: str, format: str = 'json'):
    """
    Export reports to a file.

    Args:
        reports: Reports to export
        output_path: Output file path
        format: Export format ('json', 'csv', 'markdown')
    """
    if format not in ('json', 'csv', 'markdown'):
        raise ValueError(f"Unsupported export format: {format}. Use json, csv, or markdown")

    os.makedirs(os.path.dirname(output_path) or '.', exist_ok=True)

    if format == 'json':
        with open(output_path, 'w') as f:
            json.dump({'reports': reports_to_dicts(reports)}, f, indent=2)

    elif format == 'csv':
        with open(output_path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            for row in reports_to_dicts(reports):
                writer.writerow(row)

    else:
        lines = []
        lines.append("| Label | i/s | ±% | Iterations | Batch |")
        lines.append("|---|---:|---:|---:|---:|")
        for r in reports:
            lines.append(
                f"| {r.label} | {r.ips:.1f} | {r.stddev_percentage:.1f} | "
                f"{r.iterations} | {r.cycles} |"
            )
        with open(output_path, 'w') as f:
            f.write("\n".join(lines) + "\n")
