import pytest
from structlog.testing import capture_logs

import main
from clockwork import clocks
from clockwork.config import ClockSettings, build_clock
from clockwork.domain.validation import InvalidArgument


def test_rejected_set_time_is_logged():
    clock = clocks.manual(1_000)
    with capture_logs() as logs:
        with pytest.raises(InvalidArgument):
            clock.set_time(10)

    assert logs == [
        {"event": "clock_set_time_rejected", "log_level": "debug", "current": 1_000, "new_time": 10}
    ]


def test_rejected_advance_is_logged():
    clock = clocks.manual(5)
    with capture_logs() as logs:
        with pytest.raises(InvalidArgument):
            clock.advance(-1)

    assert logs[0]["event"] == "clock_advance_rejected"
    assert logs[0]["delta"] == -1


def test_accepted_mutations_do_not_log():
    clock = clocks.manual(0)
    with capture_logs() as logs:
        clock.advance(10)
        clock.set_time(20)
        clock.now()

    assert logs == []


def test_build_clock_logs_kind():
    with capture_logs() as logs:
        build_clock(ClockSettings(kind="fixed", initial_time=3))

    assert logs[0]["event"] == "clock_built"
    assert logs[0]["kind"] == "fixed"
    assert logs[0]["clock"] == "FixedClock(time=3)"


def test_main_logs_readings_from_manual_clock(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CLOCK_KIND", "manual")
    monkeypatch.setenv("CLOCK_INITIAL_TIME", "100")
    monkeypatch.setenv("CLOCK_STEP", "50")

    with capture_logs() as logs:
        main.run(readings=3)

    readings = [entry["now"] for entry in logs if entry["event"] == "clock_reading"]
    assert readings == [100, 150, 200]
