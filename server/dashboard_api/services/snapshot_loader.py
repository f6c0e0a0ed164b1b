"""Loads an immutable health data snapshot from the read-only databases.

Routes never touch SQLite directly; they depend on `get_health_data()`,
which tests replace through `app.dependency_overrides`.
"""
import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from fastapi import HTTPException

from health_metrics import (
    ActivitySample,
    BiomarkerSnapshot,
    BodyComposition,
    recent_activity,
)

from ..config import Settings, get_settings
from ..database import DatabaseManager, DatabaseUnavailableError, db_manager

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthData:
    """Everything the metrics core needs for one patient."""

    snapshot: BiomarkerSnapshot
    activity: tuple[ActivitySample, ...] = ()
    body_comp: Optional[BodyComposition] = None
    sex: Optional[str] = None


def _to_float(val) -> Optional[float]:
    """Convert a TEXT column to a finite float, or None."""
    if val is None or val == "":
        return None
    try:
        number = float(val)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _to_int(val) -> Optional[int]:
    number = _to_float(val)
    return int(number) if number is not None else None


class SnapshotLoader:
    """Reads lab results, body composition and wearable data into HealthData."""

    def __init__(self, db: DatabaseManager, settings: Settings):
        self.db = db
        self.settings = settings

    def load(self) -> HealthData:
        snapshot = self.load_snapshot()
        body_comp = self.load_body_composition()
        activity = recent_activity(self.load_activity(), self.settings.activity_window_days)

        log.info(
            f"[SNAPSHOT] Loaded {len(snapshot.values)} biomarkers, "
            f"{len(activity)} activity days, body composition: {body_comp is not None}"
        )
        return HealthData(
            snapshot=snapshot,
            activity=tuple(activity),
            body_comp=body_comp,
            sex=self.settings.patient_sex,
        )

    def load_snapshot(self) -> BiomarkerSnapshot:
        """Latest value per biomarker; newer tests shadow older ones."""
        with self.db.get_biomarker_conn() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT biomarker_name, value FROM biomarker_data
                ORDER BY test_date DESC
                """
            )
            rows = cursor.fetchall()

        entries = []
        for row in rows:
            value = _to_float(row["value"])
            if value is None:
                log.debug(f"[SNAPSHOT] Skipping non-numeric {row['biomarker_name']}={row['value']!r}")
                continue
            entries.append((row["biomarker_name"], value))

        return BiomarkerSnapshot.from_entries(entries, patient_age=self.settings.patient_age)

    def load_body_composition(self) -> Optional[BodyComposition]:
        with self.db.get_biomarker_conn() as conn:
            if not self.db.has_table(conn, "body_composition"):
                log.debug("[SNAPSHOT] No body_composition table")
                return None
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM body_composition ORDER BY scan_date DESC LIMIT 1")
            row = cursor.fetchone()

        if row is None:
            return None

        return BodyComposition(
            body_fat_percent=_to_float(row["body_fat_percent"]),
            lean_mass=_to_float(row["lean_mass"]),
            fat_mass=_to_float(row["fat_mass"]),
            bone_mineral_content=_to_float(row["bone_mineral_content"]),
            visceral_fat=_to_float(row["visceral_fat"]),
            bone_density_t_score=_to_float(row["bone_density_t_score"]),
            almi=_to_float(row["almi"]),
        )

    def load_activity(self) -> list[ActivitySample]:
        with self.db.get_fitness_conn() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM activity_data ORDER BY date ASC")
            rows = cursor.fetchall()

        samples = []
        for row in rows:
            sample = _row_to_activity(row)
            if sample is None:
                log.debug(f"[SNAPSHOT] Skipping incomplete activity row for {row['date']}")
                continue
            samples.append(sample)
        return samples


def _row_to_activity(row) -> Optional[ActivitySample]:
    """Convert a SQLite row; rows without HRV, RHR or sleep hours are unusable."""
    hrv = _to_float(row["hrv"])
    rhr = _to_float(row["resting_heart_rate"])
    sleep_hours = _to_float(row["sleep_hours"])
    if hrv is None or rhr is None or sleep_hours is None:
        return None

    try:
        sample_date = date.fromisoformat(row["date"])
    except (TypeError, ValueError):
        return None

    return ActivitySample(
        date=sample_date,
        hrv=hrv,
        rhr=rhr,
        sleep_hours=sleep_hours,
        sleep_score=_to_float(row["sleep_score"]),
        sleep_consistency=_to_float(row["sleep_consistency"]),
        strain=_to_float(row["strain"]),
        recovery=_to_float(row["recovery"]),
        steps=_to_int(row["steps"]),
    )


def get_health_data() -> HealthData:
    """FastAPI dependency: load a fresh snapshot per request."""
    loader = SnapshotLoader(db_manager, get_settings())
    try:
        return loader.load()
    except DatabaseUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
