"""Tests for the running-time monitor."""

from __future__ import annotations

import datetime as dt
import logging
import threading

import pytest

from cloudcore.config.models import MonitorConfig
from cloudcore.services.monitor import MonitorService, format_running_time


class TestFormatRunningTime:
    def test_zero(self) -> None:
        assert format_running_time(dt.timedelta()) == "0 day(s) 00:00:00.000"

    def test_days_and_millis(self) -> None:
        elapsed = dt.timedelta(days=2, hours=3, minutes=4, seconds=5, milliseconds=67)
        assert format_running_time(elapsed) == "2 day(s) 03:04:05.067"


class TestMonitorService:
    def test_tick_logs_and_calls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        seen: list[dt.timedelta] = []
        monitor = MonitorService(on_tick=seen.append, autostart=False)
        monitor.app_name = "worker"

        with caplog.at_level(logging.DEBUG, logger="cloudcore"):
            monitor.tick()

        assert len(seen) == 1
        assert isinstance(seen[0], dt.timedelta)
        assert "worker running time: 0 day(s)" in caplog.text

    def test_callback_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def boom(_: dt.timedelta) -> None:
            raise RuntimeError("tick failed")

        monitor = MonitorService(on_tick=boom, autostart=False)
        with caplog.at_level(logging.ERROR, logger="cloudcore"):
            monitor.tick()

        assert "Monitor tick callback failed" in caplog.text
        assert "tick failed" in caplog.text

    def test_subclass_override(self) -> None:
        class CountingMonitor(MonitorService):
            ticks = 0

            def background_timer_tick(self, elapsed: dt.timedelta) -> None:
                self.ticks += 1

        monitor = CountingMonitor(autostart=False)
        monitor.tick()
        monitor.tick()
        assert monitor.ticks == 2

    def test_timer_runs_until_stopped(self) -> None:
        fired = threading.Event()
        config = MonitorConfig(frequency_seconds=0.01)

        with MonitorService(config, on_tick=lambda _: fired.set()) as monitor:
            assert monitor.running
            assert fired.wait(2.0)

        assert not monitor.running

    def test_not_started_without_autostart(self) -> None:
        monitor = MonitorService(autostart=False)
        assert not monitor.running
        monitor.start()
        assert monitor.running
        monitor.stop()
        assert not monitor.running

    def test_elapsed_grows(self) -> None:
        monitor = MonitorService(autostart=False)
        assert monitor.elapsed >= dt.timedelta(0)
