"""
Benchmark actions and entries.

An action wraps a unit of work behind a single contract: ``invoke(n)`` runs
exactly ``n`` logical iterations of it. Three variants exist:

- ``CompiledSnippet``: Python source compiled into a tight loop
- ``SingleIterationCallable``: a zero-argument callable called ``n`` times
- ``BatchedCallable``: a callable taking the iteration count, called once
"""

import itertools
import textwrap
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ipsbench.exceptions import ConfigurationError


LABEL_WIDTH = 20

_SNIPPET_TEMPLATE = """
def inner(__ips_total):
    __ips_i = 0
    while __ips_i < __ips_total:
{stmt}
        __ips_i += 1
"""


class InvocationMode(Enum):
    """How a callable action is driven by the harness."""
    SINGLE = "single"    # fn() per iteration
    BATCHED = "batched"  # fn(n) once per batch


class Action:
    """Base class for benchmark actions."""

    def invoke(self, n: int):
        """Run ``n`` iterations of the underlying work."""
        raise NotImplementedError


class CompiledSnippet(Action):
    """
    Source text compiled once into a function that loops over it.

    The loop lives inside the compiled code object, so each iteration costs
    a comparison and an increment instead of a Python call.

    Setup runs once, here, into the snippet's namespace, so names it binds
    are module globals to the snippet. A snippet that rebinds one of them
    needs a ``global`` statement.

    Args:
        code: Statement(s) to benchmark
        setup: Statement(s) run once at construction, never timed
        globals: Namespace the snippet executes in
    """

    def __init__(self, code: str, setup: str = "", globals: Optional[Dict[str, Any]] = None):
        self.code = code
        self.setup = setup
        self.namespace = dict(globals) if globals else {}
        self._inner = self._compile(code, setup)

    def _compile(self, code: str, setup: str) -> Callable[[int], None]:
        # Validate each piece on its own first so errors point at user text
        compiled_setup = None
        for name, text in (("code", code), ("setup", setup)):
            try:
                compiled_piece = compile(text, f"<ipsbench-{name}>", "exec")
            except SyntaxError as e:
                raise ConfigurationError(f"{name} does not compile: {e}") from e
            if name == "setup":
                compiled_setup = compiled_piece

        src = _SNIPPET_TEMPLATE.format(stmt=textwrap.indent(code or "pass", " " * 8))
        try:
            compiled = compile(src, "<ipsbench-snippet>", "exec")
        except SyntaxError as e:
            raise ConfigurationError(f"snippet does not compile: {e}") from e

        if setup:
            try:
                exec(compiled_setup, self.namespace)
            except Exception as e:
                raise ConfigurationError(f"setup failed: {e!r}") from e

        local_ns: Dict[str, Any] = {}
        exec(compiled, self.namespace, local_ns)
        return local_ns["inner"]

    def invoke(self, n: int):
        self._inner(n)

    def __repr__(self):
        return f"CompiledSnippet({self.code!r})"


class SingleIterationCallable(Action):
    """Calls a zero-argument callable once per iteration."""

    def __init__(self, fn: Callable[[], Any]):
        self.fn = fn

    def invoke(self, n: int):
        fn = self.fn
        for _ in itertools.repeat(None, n):
            fn()

    def __repr__(self):
        return f"SingleIterationCallable({self.fn!r})"


class BatchedCallable(Action):
    """
    Calls ``fn(n)`` once per batch.

    The callable owns the inner loop, which lets it keep per-iteration setup
    out of the timed path. Nothing checks that it really runs ``n``
    iterations.
    """

    def __init__(self, fn: Callable[[int], Any]):
        self.fn = fn

    def invoke(self, n: int):
        self.fn(n)

    def __repr__(self):
        return f"BatchedCallable({self.fn!r})"


def make_action(
    code: Optional[str] = None,
    action: Optional[Callable] = None,
    mode: InvocationMode = InvocationMode.SINGLE,
    setup: str = "",
    globals: Optional[Dict[str, Any]] = None,
    label: Optional[str] = None
) -> Action:
    """
    Build an Action from either source text or a callable.

    Args:
        code: Source snippet to compile
        action: Callable to wrap
        mode: Invocation mode for ``action``
        setup: Setup source for ``code``
        globals: Namespace for ``code``
        label: Entry label, used in error messages

    Returns:
        Action instance

    Raises:
        ConfigurationError: if both or neither of ``code``/``action`` are
            given, ``action`` is not callable, or ``code`` fails to compile
    """
    if code is not None and action is not None:
        raise ConfigurationError("specify code or a callable, but not both", label)
    if code is None and action is None:
        raise ConfigurationError("no code or callable given", label)

    if code is not None:
        if not isinstance(code, str):
            raise ConfigurationError(f"code must be a string, got {type(code).__name__}", label)
        try:
            return CompiledSnippet(code, setup=setup, globals=globals)
        except ConfigurationError as e:
            raise ConfigurationError(str(e), label) from e.__cause__

    if not callable(action):
        raise ConfigurationError(f"invalid action {action!r}, must be callable", label)
    if setup or globals:
        raise ConfigurationError("setup and globals only apply to code snippets", label)

    try:
        mode = InvocationMode(mode)
    except ValueError as e:
        raise ConfigurationError(f"unknown invocation mode {mode!r}", label) from e
    if mode is InvocationMode.BATCHED:
        return BatchedCallable(action)
    return SingleIterationCallable(action)


class Entry:
    """
    One benchmark target: a label and its action.

    Entries hash by identity, so two entries with the same label stay
    distinct keys in a calibration map.
    """

    def __init__(self, label: str, action: Action):
        self.label = label
        self.action = action

    def invoke(self, n: int):
        self.action.invoke(n)

    def label_rjust(self) -> str:
        """Label formatted for the console report column."""
        if len(self.label) > LABEL_WIDTH:
            return f"{self.label}\n{' ' * LABEL_WIDTH}"
        return self.label.rjust(LABEL_WIDTH)

    def __repr__(self):
        return f"Entry({self.label!r}, {self.action!r})"
