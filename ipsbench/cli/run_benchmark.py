"""
Command-line entry point for benchmarking Python snippets.

Usage:
    python -m ipsbench.cli.run_benchmark "join='-'.join(map(str, range(100)))" "sum(range(100))"
    python -m ipsbench.cli.run_benchmark --config configs/bench.yaml -c -s "x = 3" "double=x*2" "square=x**2"
"""

import sys
from typing import List, Optional, Tuple

from ipsbench.compare import compare
from ipsbench.config import BenchConfig, load_config, create_argparser, merge_config_with_args
from ipsbench.exceptions import ConfigurationError
from ipsbench.job import IPSJob
from ipsbench.report import IPSReport
from ipsbench.results import export_reports
from ipsbench.utils.logging import setup_logger


def parse_entry(text: str) -> Tuple[str, str]:
    """
    Split ``LABEL=CODE`` into its parts.

    A leading ``=`` that belongs to the code (``x == 1``) is not a label
    separator; when the part before the first ``=`` is not an identifier the
    whole text is code and becomes its own label.
    """
    label, sep, code = text.partition('=')
    if sep and label.strip().isidentifier() and not code.startswith('='):
        return label.strip(), code
    return text, text


def run_benchmark(config: BenchConfig, entries: List[str], setup: str = "") -> List[IPSReport]:
    """
    Benchmark source snippets according to config.

    Args:
        config: Benchmark configuration
        entries: ``LABEL=CODE`` strings
        setup: Setup source shared by every snippet

    Returns:
        Reports in the order given
    """
    logger = setup_logger("ipsbench", log_level=config.log_level)

    job = config.apply(IPSJob())

    for text in entries:
        label, code = parse_entry(text)
        job.register(label, code=code, setup=setup)

    logger.info(f"Benchmarking {len(job.entries)} entries "
                f"(warmup={job.warmup}s, time={job.time}s)")

    reports = job.run()

    if job.compare_enabled:
        compare(*reports)

    if config.output:
        export_reports(reports, config.output, format=config.output_format)
        logger.info(f"Results saved to {config.output}")

    return reports


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argparser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else BenchConfig()
    except (OSError, ValueError) as e:
        print(f"ipsbench: cannot load config: {e}", file=sys.stderr)
        return 2

    config = merge_config_with_args(config, args)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"ipsbench: {error}", file=sys.stderr)
        return 2

    if not args.entries:
        parser.print_usage(sys.stderr)
        print("ipsbench: no entries given", file=sys.stderr)
        return 2

    try:
        run_benchmark(config, args.entries, setup=args.setup)
    except ConfigurationError as e:
        print(f"ipsbench: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
