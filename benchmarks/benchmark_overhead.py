"""
Measure the harness's own per-iteration overhead.

An empty body shows how fast each action variant can go: the compiled
snippet loop should beat the callable loops by a wide margin.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ipsbench import IPSJob
from ipsbench.compare import compare
from ipsbench.results import generate_summary_table


def noop():
    pass


def noop_batched(n):
    for _ in range(n):
        pass


def main(time=3, warmup=1):
    job = IPSJob()
    job.configure(warmup=warmup, time=time)

    job.register("snippet: pass", code="pass")
    job.register("callable: noop", action=noop)
    job.register_batched("batched: loop", noop_batched)

    reports = job.run(context=__file__)
    compare(*reports)

    print(generate_summary_table(reports))
    return reports


if __name__ == "__main__":
    main()
