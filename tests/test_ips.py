"""
Tests for the top-level ips() helper.
"""

from ipsbench import ips, LoggingSuite


def test_ips_returns_reports_in_order():
    def setup(job):
        job.register("upper", action=lambda: "abc".upper())
        job.register("snippet", code="'abc'.upper()")

    reports = ips(setup, time=0.02, warmup=0.02, quiet=True)

    assert [r.label for r in reports] == ["upper", "snippet"]
    assert all(r.cycles >= 1 for r in reports)


def test_ips_compare_prints(capsys):
    def setup(job):
        job.register("a", code="pass")
        job.register("b", code="[0] * 10")
        job.enable_compare()

    ips(setup, time=0.02, warmup=0.01)

    out = capsys.readouterr().out
    assert out.startswith("Calculating")
    assert "Comparison:" in out


def test_ips_quiet_suite_forwards_context(capsys):
    suite = LoggingSuite(quiet=True)

    def setup(job):
        job.register_batched("batched", lambda n: None)
        job.enable_compare()

    reports = ips(setup, time=0.01, warmup=0.01, suite=suite, context="test_ips")

    assert capsys.readouterr().out == ""
    assert suite.reports == reports
    assert suite.contexts == ["test_ips"]
