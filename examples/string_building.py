"""
Compare ways of building a string.

Run:
    python examples/string_building.py
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ipsbench import ips


WORDS = [str(i) for i in range(100)]


def concat():
    out = ""
    for w in WORDS:
        out += w
    return out


def join_batched(n):
    # one list lookup per batch instead of per iteration
    words = WORDS
    for _ in range(n):
        "".join(words)


def setup(job):
    job.register("concat", action=concat)
    job.register_batched("join (batched)", join_batched)
    job.register("join (snippet)", code="''.join(words)", globals={'words': WORDS})
    job.register("f-string", code="out = ''\nfor w in words:\n    out = f'{out}{w}'",
                 globals={'words': WORDS})
    job.enable_compare()


if __name__ == "__main__":
    ips(setup, time=2, warmup=1)
