"""
ipsbench CLI Module

Command-line interface for benchmarking snippets.
"""

from ipsbench.cli.run_benchmark import main, run_benchmark

__all__ = ['main', 'run_benchmark']
