"""
ipsbench Configuration Management

This module provides configuration loading and CLI integration for benchmark runs.
"""

from ipsbench.config.config import (
    Config,
    BenchConfig,
    load_config,
    save_config,
    create_argparser,
    merge_config_with_args
)

__all__ = [
    'Config',
    'BenchConfig',
    'load_config',
    'save_config',
    'create_argparser',
    'merge_config_with_args'
]
