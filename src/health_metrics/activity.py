"""Wearable activity windowing and averaging."""
import logging
from datetime import date as Date
from datetime import timedelta
from typing import List, Optional, Sequence

from .models import ActivitySample, ActivitySummary
from .numeric import round_half_up

logger = logging.getLogger(__name__)


def recent_activity(
    samples: Sequence[ActivitySample],
    days: int,
    reference_date: Optional[Date] = None,
) -> List[ActivitySample]:
    """
    Keep samples from the last `days` days, oldest first.

    The window ends at `reference_date`, which defaults to the newest sample's
    date so that a stale export still yields its most recent month.
    """
    if not samples or days <= 0:
        return []

    end = reference_date or max(sample.date for sample in samples)
    start = end - timedelta(days=days - 1)
    window = sorted(
        (sample for sample in samples if start <= sample.date <= end),
        key=lambda sample: sample.date,
    )
    logger.debug(f"[ACTIVITY] {len(window)}/{len(samples)} samples in {start}..{end}")
    return window


def summarize_activity(samples: Sequence[ActivitySample]) -> Optional[ActivitySummary]:
    """Average HRV, resting heart rate and sleep over the given samples."""
    if not samples:
        return None

    count = len(samples)
    steps = _mean_present(samples, "steps")
    return ActivitySummary(
        days=count,
        hrv=sum(sample.hrv for sample in samples) / count,
        rhr=sum(sample.rhr for sample in samples) / count,
        sleep_hours=sum(sample.sleep_hours for sample in samples) / count,
        sleep_score=_mean_present(samples, "sleep_score"),
        recovery=_mean_present(samples, "recovery"),
        strain=_mean_present(samples, "strain"),
        steps=int(round_half_up(steps)) if steps is not None else None,
    )


def _mean_present(samples: Sequence[ActivitySample], field: str) -> Optional[float]:
    """Mean of an optional field over the samples that report it."""
    values = [getattr(sample, field) for sample in samples if getattr(sample, field) is not None]
    if not values:
        logger.debug(f"[ACTIVITY] No samples report {field}")
        return None
    return sum(values) / len(values)
