"""
Statistics over throughput samples and environment reset between passes.
"""

import gc
import logging
from typing import Dict, Sequence

import numpy as np
import psutil


logger = logging.getLogger(__name__)


def mean(samples: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for no samples."""
    if len(samples) == 0:
        return 0.0
    return float(np.mean(np.asarray(samples, dtype=np.float64)))


def variance(samples: Sequence[float]) -> float:
    """Population variance, 0.0 for no samples."""
    if len(samples) == 0:
        return 0.0
    return float(np.var(np.asarray(samples, dtype=np.float64)))


def stddev(samples: Sequence[float]) -> float:
    """Population standard deviation, 0.0 for no samples."""
    return float(np.sqrt(variance(samples)))


def get_memory_usage() -> Dict[str, float]:
    """
    Get current memory usage of this process.

    Returns:
        Dictionary with memory usage in MB
    """
    process = psutil.Process()
    mem_info = process.memory_info()
    return {
        'rss_mb': mem_info.rss / 1024 / 1024,
        'vms_mb': mem_info.vms / 1024 / 1024,
    }


def clean_env():
    """
    Reduce allocation noise before a timed pass.

    Runs a full garbage collection. Called by the job before each
    calibration and measurement pass, outside any timed region.
    """
    if logger.isEnabledFor(logging.DEBUG):
        before = get_memory_usage()['rss_mb']
        collected = gc.collect()
        after = get_memory_usage()['rss_mb']
        logger.debug(f"gc collected {collected} objects, rss {before:.1f} MB -> {after:.1f} MB")
    else:
        gc.collect()
