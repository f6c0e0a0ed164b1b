"""
Unit tests for wearable activity windowing.

Usage:
    pytest tests/test_activity.py -v
"""
from datetime import date, timedelta

import pytest

from health_metrics.activity import recent_activity, summarize_activity
from health_metrics.models import ActivitySample


def make_samples(start: date, days: int, hrv: float = 50, rhr: float = 60, sleep: float = 7.5):
    """Consecutive daily samples starting at `start`."""
    return [
        ActivitySample(date=start + timedelta(days=i), hrv=hrv + i, rhr=rhr, sleep_hours=sleep)
        for i in range(days)
    ]


class TestRecentActivity:
    """recent_activity() windowing."""

    def test_window_ends_at_latest_sample(self):
        """The default window ends at the newest sample date."""
        samples = make_samples(date(2025, 8, 1), 45)
        window = recent_activity(samples, 30)

        assert len(window) == 30
        assert window[0].date == date(2025, 8, 16)
        assert window[-1].date == date(2025, 9, 14)

    def test_sorted_oldest_first(self):
        """Output is ordered by date regardless of input order."""
        samples = list(reversed(make_samples(date(2025, 8, 1), 10)))
        window = recent_activity(samples, 7)

        dates = [sample.date for sample in window]
        assert dates == sorted(dates)

    def test_reference_date(self):
        """An explicit reference date moves the window."""
        samples = make_samples(date(2025, 8, 1), 45)
        window = recent_activity(samples, 7, reference_date=date(2025, 8, 10))

        assert [sample.date.day for sample in window] == list(range(4, 11))

    def test_gaps_are_not_filled(self):
        """Missing days shrink the window instead of padding it."""
        samples = make_samples(date(2025, 8, 1), 10)
        del samples[5]
        assert len(recent_activity(samples, 10)) == 9

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_window(self, days):
        """A non-positive window is empty."""
        assert recent_activity(make_samples(date(2025, 8, 1), 5), days) == []

    def test_no_samples(self):
        """No samples, no window."""
        assert recent_activity([], 30) == []


class TestSummarizeActivity:
    """summarize_activity() averages."""

    def test_averages(self):
        """HRV, RHR and sleep are averaged across the samples."""
        summary = summarize_activity(make_samples(date(2025, 8, 1), 3, hrv=50, rhr=60, sleep=7))

        assert summary.days == 3
        assert summary.hrv == pytest.approx(51)
        assert summary.rhr == 60
        assert summary.sleep_hours == 7

    def test_empty(self):
        """No samples summarise to None."""
        assert summarize_activity([]) is None

    def test_optional_metrics_average_over_present_samples(self):
        """Recovery, strain, sleep score and steps skip samples that lack them."""
        samples = make_samples(date(2025, 8, 1), 3)
        samples[0] = samples[0].model_copy(
            update={"recovery": 60, "strain": 10.0, "steps": 8001, "sleep_score": 80}
        )
        samples[2] = samples[2].model_copy(update={"recovery": 80, "steps": 8002})

        summary = summarize_activity(samples)

        assert summary.days == 3
        assert summary.recovery == pytest.approx(70)
        assert summary.strain == pytest.approx(10.0)
        assert summary.sleep_score == pytest.approx(80)
        assert summary.steps == 8002

    def test_optional_metrics_absent(self):
        """Metrics no sample reports are None."""
        summary = summarize_activity(make_samples(date(2025, 8, 1), 3))

        assert summary.recovery is None
        assert summary.strain is None
        assert summary.sleep_score is None
        assert summary.steps is None

    def test_summary_serialises_camel_case(self):
        """Optional metrics are exposed under camelCase keys."""
        samples = [make_samples(date(2025, 8, 1), 1)[0].model_copy(update={"sleep_score": 91})]
        body = summarize_activity(samples).model_dump(by_alias=True)

        assert body["sleepScore"] == 91
        assert body["sleepHours"] == 7.5
