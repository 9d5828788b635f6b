import logging

import pytest

import tools
from tools import enable_profiling, profile, profiling_enabled


@pytest.fixture(autouse=True)
def restore_profiling():
    enabled = profiling_enabled()
    yield
    enable_profiling(enabled)


@profile()
def add(a, b):
    return a + b


def test_passes_result_through():
    enable_profiling(False)
    assert add(1, 2) == 3
    assert add.__name__ == "add"


def test_logs_time_when_disabled(caplog):
    enable_profiling(False)
    caplog.set_level(logging.DEBUG, logger=tools.__name__)

    add(1, 2)

    messages = [r.getMessage() for r in caplog.records if r.name == tools.__name__]
    assert any(m.startswith("add took ") for m in messages)
    assert not any("profile of" in m for m in messages)


def test_logs_stats_when_enabled(caplog):
    enable_profiling()
    caplog.set_level(logging.INFO, logger=tools.__name__)

    assert add(2, 3) == 5

    messages = [r.getMessage() for r in caplog.records if r.name == tools.__name__]
    assert any(m.startswith("profile of add:") for m in messages)


def test_exceptions_propagate():
    @profile()
    def fail():
        raise ValueError("boom")

    for flag in (False, True):
        enable_profiling(flag)
        with pytest.raises(ValueError):
            fail()


def test_enable_profiling():
    enable_profiling()
    assert profiling_enabled()
    enable_profiling(False)
    assert not profiling_enabled()


def test_falls_back_to_timing_when_another_profiler_runs(monkeypatch, caplog):
    class BusyProfile:
        def enable(self):
            raise ValueError("Another profiling tool is already active")

    monkeypatch.setattr(tools.cProfile, "Profile", BusyProfile)
    enable_profiling()
    caplog.set_level(logging.DEBUG, logger=tools.__name__)

    assert add(4, 5) == 9

    messages = [r.getMessage() for r in caplog.records if r.name == tools.__name__]
    assert any(m.startswith("add took ") for m in messages)
    assert not any("profile of" in m for m in messages)
