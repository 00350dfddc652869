"""
Configuration management for benchmark runs.

Supports YAML/JSON config files and command-line argument integration.
"""

import argparse
import json
import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, List, Optional

import yaml


EXPORT_FORMATS = ('json', 'csv', 'markdown')


@dataclass
class BenchConfig:
    """Benchmark run configuration."""
    warmup: float = 2.0  # seconds of calibration per entry
    time: float = 5.0  # seconds of measurement per entry
    quiet: bool = False
    compare: bool = False
    log_level: str = "WARNING"
    output: Optional[str] = None
    output_format: str = "json"  # json, csv, markdown

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BenchConfig':
        """Create config from dictionary. Unknown keys raise ValueError."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.warmup < 0:
            errors.append("Warmup must be non-negative")

        if self.time < 0:
            errors.append("Time must be non-negative")

        if self.output_format not in EXPORT_FORMATS:
            errors.append(f"Output format must be one of {', '.join(EXPORT_FORMATS)}")

        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def apply(self, job):
        """Copy durations and flags onto an IPSJob."""
        job.configure(warmup=self.warmup, time=self.time)
        job.quiet = self.quiet
        if self.compare:
            job.enable_compare()
        return job


class Config:
    """File loaders and writers for BenchConfig."""

    @staticmethod
    def load_yaml(filepath: str) -> BenchConfig:
        """Load configuration from YAML file."""
        with open(filepath, 'r') as f:
            data = yaml.safe_load(f)

        return BenchConfig.from_dict(data)

    @staticmethod
    def load_json(filepath: str) -> BenchConfig:
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return BenchConfig.from_dict(data)

    @staticmethod
    def save_yaml(config: BenchConfig, filepath: str):
        """Save configuration to YAML file."""
        os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    @staticmethod
    def save_json(config: BenchConfig, filepath: str):
        """Save configuration to JSON file."""
        os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)


def load_config(filepath: str) -> BenchConfig:
    """Load configuration from file (auto-detect YAML/JSON)."""
    ext = os.path.splitext(filepath)[1].lower()

    if ext in ['.yaml', '.yml']:
        return Config.load_yaml(filepath)
    elif ext == '.json':
        return Config.load_json(filepath)
    else:
        raise ValueError(f"Unsupported config file format: {ext}. Use .yaml, .yml, or .json")


def save_config(config: BenchConfig, filepath: str):
    """Save configuration to file (auto-detect YAML/JSON)."""
    ext = os.path.splitext(filepath)[1].lower()

    if ext in ['.yaml', '.yml']:
        Config.save_yaml(config, filepath)
    elif ext == '.json':
        Config.save_json(config, filepath)
    else:
        raise ValueError(f"Unsupported config file format: {ext}. Use .yaml, .yml, or .json")


def create_argparser() -> argparse.ArgumentParser:
    """Create argument parser with common config options."""
    parser = argparse.ArgumentParser(
        prog='ipsbench',
        description='Measure iterations per second of Python snippets'
    )

    parser.add_argument('entries', nargs='*', metavar='LABEL=CODE',
                        help='Snippet to benchmark, optionally prefixed with a label')
    parser.add_argument('--config', type=str, help='Path to config file (YAML/JSON)')
    parser.add_argument('-w', '--warmup', type=float, help='Calibration seconds per entry')
    parser.add_argument('-t', '--time', type=float, help='Measurement seconds per entry')
    parser.add_argument('-s', '--setup', type=str, default='', help='Setup code run before each pass')
    parser.add_argument('-q', '--quiet', action='store_true', default=None, help='Suppress progress output')
    parser.add_argument('-c', '--compare', action='store_true', default=None, help='Print a comparison')
    parser.add_argument('-o', '--output', type=str, help='Write results to this file')
    parser.add_argument('-f', '--format', dest='output_format', choices=EXPORT_FORMATS,
                        help='Output file format')
    parser.add_argument('--log-level', type=str, help='Logging level')

    return parser


def merge_config_with_args(config: BenchConfig, args: argparse.Namespace) -> BenchConfig:
    """Merge command-line arguments into config."""
    if args.warmup is not None:
        config.warmup = args.warmup
    if args.time is not None:
        config.time = args.time
    if args.quiet:
        config.quiet = True
    if args.compare:
        config.compare = True
    if args.output:
        config.output = args.output
    if args.output_format:
        config.output_format = args.output_format
    if args.log_level:
        config.log_level = args.log_level

    return config
