"""
Calibrate-then-measure benchmark job.

A job holds an ordered list of entries. ``calibrate`` spends the warmup
duration on each entry to find how many iterations fit in about 100ms;
``measure`` then runs batches of that size for the configured time and
reports the mean and standard deviation of per-batch throughput.

Examples:
    >>> job = IPSJob()
    >>> job.register("join", code="'-'.join(['a'] * 10)")
    >>> job.register("format", action=lambda: "%s-%s" % ("a", "b"))
    >>> timing = job.calibrate()
    >>> reports = job.measure(timing)
"""

import logging
import numbers
import sys
import time
from typing import Any, Callable, Dict, List, Optional, TextIO

from ipsbench import timing as timing_utils
from ipsbench.action import Entry, InvocationMode, make_action
from ipsbench.exceptions import ConfigurationError, SequencingError
from ipsbench.report import IPSReport
from ipsbench.suite import Suite


logger = logging.getLogger(__name__)

MICROSECONDS_PER_SECOND = 1_000_000.0
TARGET_BATCH_MICROSECONDS = 100_000.0


class IPSJob:
    """
    Benchmark job measuring iterations per second of registered entries.

    Args:
        suite: Optional observer receiving progress callbacks
        quiet: Suppress console output
        clock: Monotonic clock returning seconds
        clean_env: Hook called before each timed pass, never timed itself
        stream: Console output stream (default: stdout)

    Attributes:
        warmup: Calibration duration per entry, in seconds
        time: Measurement duration per entry, in seconds
        entries: Registered entries, in registration order
    """

    def __init__(
        self,
        suite: Optional[Suite] = None,
        quiet: bool = False,
        clock: Callable[[], float] = time.perf_counter,
        clean_env: Callable[[], Any] = timing_utils.clean_env,
        stream: Optional[TextIO] = None
    ):
        self.suite = suite
        self.quiet = quiet
        self.clock = clock
        self.clean_env = clean_env
        self.stream = stream
        self.entries: List[Entry] = []
        self._compare = False

        # defaults
        self.warmup = 2
        self.time = 5

    @property
    def compare_enabled(self) -> bool:
        """Whether the caller asked for a comparison after measuring."""
        return self._compare

    def enable_compare(self):
        self._compare = True

    def configure(self, warmup: Optional[float] = None, time: Optional[float] = None) -> 'IPSJob':
        """
        Set durations in seconds. Arguments left as None keep their value.
        """
        for name, value in (('warmup', warmup), ('time', time)):
            if value is None:
                continue
            if value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")
            setattr(self, name, value)
        return self

    def register(
        self,
        label: str = "",
        code: Optional[str] = None,
        action: Optional[Callable] = None,
        mode: InvocationMode = InvocationMode.SINGLE,
        setup: str = "",
        globals: Optional[Dict[str, Any]] = None
    ) -> 'IPSJob':
        """
        Add an entry to the job.

        Args:
            label: Name shown in reports; need not be unique
            code: Source snippet to benchmark
            action: Callable to benchmark
            mode: ``SINGLE`` calls ``action()`` per iteration, ``BATCHED``
                calls ``action(n)`` once per batch
            setup: Setup source for ``code``
            globals: Namespace for ``code``

        Returns:
            self, for chaining

        Raises:
            ConfigurationError: on an invalid code/action combination
        """
        built = make_action(code=code, action=action, mode=mode,
                            setup=setup, globals=globals, label=label)
        self.entries.append(Entry(label, built))
        logger.debug(f"Registered {label!r}: {built!r}")
        return self

    item = register
    report = register

    def register_batched(self, label: str, action: Callable[[int], Any]) -> 'IPSJob':
        """Register a callable that runs its own loop of ``n`` iterations."""
        return self.register(label, action=action, mode=InvocationMode.BATCHED)

    def _print(self, text: str, end: str = "\n"):
        if not self.quiet:
            print(text, end=end, file=self.stream or sys.stdout, flush=True)

    def calibrate(self) -> Dict[Entry, int]:
        """
        Find, per entry, the batch size that runs in about 100ms.

        Returns:
            Mapping from entry to batch size (always >= 1)
        """
        timing: Dict[Entry, int] = {}
        clock = self.clock
        entries = list(self.entries)

        for entry in entries:
            if self.suite is not None:
                self.suite.warming(entry.label, self.warmup)

            self._print(entry.label_rjust(), end="")

            self.clean_env()

            before = clock()
            target = before + self.warmup

            warmup_iter = 0
            while clock() < target:
                entry.invoke(1)
                warmup_iter += 1

            after = clock()

            warmup_time_us = (after - before) * MICROSECONDS_PER_SECOND

            if warmup_time_us > 0:
                cycles = int((TARGET_BATCH_MICROSECONDS / warmup_time_us) * warmup_iter)
            else:
                cycles = 0
            if cycles <= 0:
                cycles = 1

            timing[entry] = cycles

            logger.debug(f"{entry.label!r}: {warmup_iter} warmup iterations in "
                         f"{warmup_time_us:.0f}us -> {cycles} i/100ms")
            self._print("%10d i/100ms" % cycles)

            if self.suite is not None:
                self.suite.warmup_stats(warmup_time_us, cycles)

        return timing

    def _check_timing(self, timing: Dict[Entry, int], entries: List[Entry]):
        if timing is None:
            raise SequencingError("measure() requires the result of calibrate()")
        for entry in entries:
            if entry not in timing:
                raise SequencingError(
                    f"no calibration for entry {entry.label!r}; run calibrate() first"
                )
            cycles = timing[entry]
            if not isinstance(cycles, numbers.Integral) or cycles < 1:
                raise SequencingError(
                    f"invalid batch size {cycles!r} for entry {entry.label!r}"
                )

    def measure(self, timing: Dict[Entry, int], context: Any = None) -> List[IPSReport]:
        """
        Run calibrated batches of each entry for the configured time.

        Args:
            timing: Result of ``calibrate()`` covering every entry
            context: Value forwarded to ``suite.add_report`` with each report

        Returns:
            One report per entry, in registration order

        Raises:
            SequencingError: if ``timing`` does not cover every entry
        """
        entries = list(self.entries)
        self._check_timing(timing, entries)

        reports: List[IPSReport] = []
        clock = self.clock

        for entry in entries:
            if self.suite is not None:
                self.suite.running(entry.label, self.time)

            self._print(entry.label_rjust(), end="")

            self.clean_env()

            cycles = int(timing[entry])
            iterations = 0
            measurements: List[float] = []

            target = clock() + self.time

            while clock() < target:
                before = clock()
                entry.invoke(cycles)
                after = clock()

                # A batch that appears to take no time says more about the
                # clock than the action; drop it.
                m = (after - before) * MICROSECONDS_PER_SECOND
                if m <= 0:
                    continue

                iterations += cycles
                measurements.append(m)

            measured_us = sum(measurements)

            all_ips = [cycles / (m / MICROSECONDS_PER_SECOND) for m in measurements]

            avg_ips = timing_utils.mean(all_ips)
            sd_ips = int(round(timing_utils.stddev(all_ips)))

            rep = IPSReport(
                label=entry.label,
                microseconds=measured_us,
                iterations=iterations,
                ips=avg_ips,
                ips_sd=sd_ips,
                cycles=cycles,
            )

            logger.debug(f"{entry.label!r}: {len(measurements)} samples, {rep.body.strip()}")
            self._print(" " + rep.body)

            if self.suite is not None:
                self.suite.add_report(rep, context)

            reports.append(rep)

        return reports

    def run(self, context: Any = None) -> List[IPSReport]:
        """Calibrate, then measure. Returns the reports."""
        self._print("Calculating -------------------------------------")
        timing = self.calibrate()
        self._print("-------------------------------------------------")
        return self.measure(timing, context=context)
