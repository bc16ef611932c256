# Area: Round Tests
"""Tests for RoundTimers — generation-tagged interval timers."""

from unittest.mock import patch

from tx_battle._round.timers import RoundTimers


MOCK_TIME = "tx_battle._round.timers.time"


class TestSchedule:
    """Unit tests for schedule() and cancel_generation()."""

    def test_no_timers_initially(self):
        timers = RoundTimers()
        assert timers.active() == []
        assert timers.run_due(0) == 0

    def test_not_due_before_interval(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            timers.schedule("tick", 1, 1.0, lambda: calls.append("tick"))

            mock_time.monotonic.return_value = 100.5
            assert timers.run_due(1) == 0
            assert calls == []

            mock_time.monotonic.return_value = 101.0
            assert timers.run_due(1) == 1
            assert calls == ["tick"]

    def test_schedule_same_name_replaces(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("tick", 1, 1.0, lambda: calls.append("old"))
            timers.schedule("tick", 1, 1.0, lambda: calls.append("new"))

            mock_time.monotonic.return_value = 1.0
            timers.run_due(1)

        assert calls == ["new"]
        assert timers.active() == ["tick"]

    def test_cancel_generation(self):
        timers = RoundTimers()
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("poll", 1, 30.0, lambda: None)
            timers.schedule("tick", 1, 1.0, lambda: None)
            timers.schedule("other", 2, 1.0, lambda: None)

        assert timers.cancel_generation(1) == 2
        assert timers.active() == ["other"]
        assert timers.cancel_generation(1) == 0


class TestRunDue:
    """Unit tests for run_due()."""

    def test_stale_generation_dropped_without_firing(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("tick", 1, 1.0, lambda: calls.append("tick"))

            mock_time.monotonic.return_value = 5.0
            assert timers.run_due(2) == 0

        assert calls == []
        assert timers.active() == []

    def test_priority_order_poll_before_tick(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("tick", 1, 30.0, lambda: calls.append("tick"), priority=1)
            timers.schedule("poll", 1, 30.0, lambda: calls.append("poll"), priority=0)

            mock_time.monotonic.return_value = 30.0
            timers.run_due(1)

        assert calls == ["poll", "tick"]

    def test_catch_up_fires_once_per_elapsed_interval(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("tick", 1, 1.0, lambda: calls.append(1), catch_up=True)

            mock_time.monotonic.return_value = 3.5
            assert timers.run_due(1) == 3

            mock_time.monotonic.return_value = 4.0
            assert timers.run_due(1) == 1

        assert len(calls) == 4

    def test_without_catch_up_fires_once_and_reschedules_from_now(self):
        timers = RoundTimers()
        calls = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("poll", 1, 30.0, lambda: calls.append(1))

            mock_time.monotonic.return_value = 95.0
            assert timers.run_due(1) == 1

            mock_time.monotonic.return_value = 124.0
            assert timers.run_due(1) == 0

            mock_time.monotonic.return_value = 125.0
            assert timers.run_due(1) == 1

    def test_callback_cancelling_generation_stops_later_timers(self):
        timers = RoundTimers()
        calls = []

        def poll():
            calls.append("poll")
            timers.cancel_generation(1)

        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            timers.schedule("poll", 1, 1.0, poll, priority=0)
            timers.schedule("tick", 1, 1.0, lambda: calls.append("tick"), priority=1, catch_up=True)

            mock_time.monotonic.return_value = 3.0
            assert timers.run_due(1) == 1

        assert calls == ["poll"]
        assert timers.active() == []
