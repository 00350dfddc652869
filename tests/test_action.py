"""
Tests for actions and entries.
"""

import pytest
from ipsbench import (
    InvocationMode,
    CompiledSnippet,
    SingleIterationCallable,
    BatchedCallable,
    Entry,
    make_action,
    ConfigurationError
)


@pytest.mark.parametrize("n", [0, 1, 5, 1000])
def test_compiled_snippet_runs_n_times(n):
    """Snippet effect happens exactly n times per invoke."""
    counter = [0]
    action = CompiledSnippet("counter[0] += 1", globals={'counter': counter})

    action.invoke(n)

    assert counter[0] == n


def test_compiled_snippet_multiline_and_setup():
    """Setup runs once at construction, multi-line code runs per iteration."""
    log = []
    action = CompiledSnippet(
        "global x\nx += 1\nlog.append(x)",
        setup="x = 10",
        globals={'log': log}
    )

    action.invoke(3)
    action.invoke(2)

    assert log == [11, 12, 13, 14, 15]


def test_compiled_snippet_setup_runs_once():
    """Setup is not repeated by invoke."""
    calls = []
    action = CompiledSnippet("data[0]", setup="calls.append(1)\ndata = [7]",
                             globals={'calls': calls})

    assert calls == [1]

    action.invoke(1)
    action.invoke(50)

    assert calls == [1]


def test_compiled_snippet_setup_failure():
    """Setup that raises is reported at construction."""
    with pytest.raises(ConfigurationError, match="setup failed"):
        CompiledSnippet("pass", setup="1 / 0")


def test_compiled_snippet_does_not_mutate_globals():
    """The caller's namespace dict is copied."""
    ns = {'value': 1}
    CompiledSnippet("value + 1", globals=ns).invoke(2)

    assert list(ns) == ['value']


def test_compiled_snippet_syntax_error():
    """Compilation fails at construction."""
    with pytest.raises(ConfigurationError):
        CompiledSnippet("this is not python")


def test_compiled_snippet_setup_syntax_error():
    with pytest.raises(ConfigurationError):
        CompiledSnippet("pass", setup="def (")


@pytest.mark.parametrize("n", [0, 1, 5, 1000])
def test_single_iteration_callable(n):
    """Callable is called n times with no arguments."""
    calls = []
    action = SingleIterationCallable(lambda *args: calls.append(args))

    action.invoke(n)

    assert len(calls) == n
    assert all(args == () for args in calls)


@pytest.mark.parametrize("n", [0, 1, 5, 1000])
def test_batched_callable(n):
    """Callable is called once with n."""
    calls = []
    action = BatchedCallable(lambda times: calls.append(times))

    action.invoke(n)

    assert calls == [n]


def test_make_action_variants():
    """make_action picks the variant from its arguments."""
    assert isinstance(make_action(code="1 + 1"), CompiledSnippet)
    assert isinstance(make_action(action=lambda: None), SingleIterationCallable)
    assert isinstance(
        make_action(action=lambda n: None, mode=InvocationMode.BATCHED),
        BatchedCallable
    )
    assert isinstance(make_action(action=lambda n: None, mode="batched"), BatchedCallable)


def test_make_action_mode_is_not_inferred():
    """A one-argument callable without BATCHED mode is still single-call."""
    action = make_action(action=lambda n=None: None)

    assert isinstance(action, SingleIterationCallable)


def test_make_action_both_given():
    with pytest.raises(ConfigurationError, match="not both"):
        make_action(code="1", action=lambda: None, label="dup")


def test_make_action_neither_given():
    with pytest.raises(ConfigurationError) as exc_info:
        make_action(label="empty")

    assert exc_info.value.label == "empty"
    assert "'empty'" in str(exc_info.value)


def test_make_action_not_callable():
    with pytest.raises(ConfigurationError, match="callable"):
        make_action(action=42)


def test_make_action_setup_with_callable():
    with pytest.raises(ConfigurationError):
        make_action(action=lambda: None, setup="x = 1")


def test_make_action_bad_code_carries_label():
    with pytest.raises(ConfigurationError) as exc_info:
        make_action(code="1 +", label="broken")

    assert exc_info.value.label == "broken"


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        make_action()


def test_entry_label_rjust_short():
    entry = Entry("short", SingleIterationCallable(lambda: None))

    assert entry.label_rjust() == "               short"
    assert len(entry.label_rjust()) == 20


def test_entry_label_rjust_long():
    """Labels over 20 characters go on their own line."""
    label = "a" * 21
    entry = Entry(label, SingleIterationCallable(lambda: None))

    assert entry.label_rjust() == label + "\n" + " " * 20


def test_entries_hash_by_identity():
    """Entries with the same label are distinct keys."""
    a = Entry("same", SingleIterationCallable(lambda: None))
    b = Entry("same", SingleIterationCallable(lambda: None))

    timing = {a: 1, b: 2}

    assert len(timing) == 2
    assert timing[a] == 1


def test_make_action_unknown_mode_carries_label():
    with pytest.raises(ConfigurationError) as exc_info:
        make_action(action=lambda: None, mode="sometimes", label="moody")

    assert exc_info.value.label == "moody"
    assert "sometimes" in str(exc_info.value)
