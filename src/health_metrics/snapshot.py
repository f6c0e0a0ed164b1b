"""Immutable per-patient biomarker snapshot."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator

from .calculations import combine_measured_and_calculated, deduplicate_entries, merge_with_calculated
from .models import BiomarkerRecord
from .reference import lookup
from .reference_data import BIOMARKER_REFERENCES
from .status import AGE_FIELD

logger = logging.getLogger(__name__)


class BiomarkerSnapshot(BaseModel):
    """
    One patient's current biomarker values.

    Chronological age travels next to the values, never inside them.
    Instances are frozen; derived views return new snapshots or plain dicts.
    """

    model_config = ConfigDict(frozen=True)

    values: Dict[str, FiniteFloat] = Field(default_factory=dict)
    patient_age: Optional[FiniteFloat] = Field(default=None, ge=0)

    @field_validator("values")
    @classmethod
    def _reject_age_key(cls, values: Dict[str, float]) -> Dict[str, float]:
        if AGE_FIELD in values:
            raise ValueError(f"{AGE_FIELD} belongs in patient_age, not in values")
        return values

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[str, float]],
        patient_age: Optional[float] = None,
    ) -> "BiomarkerSnapshot":
        """
        Build a snapshot from extracted (name, value) pairs.

        Names are normalized to catalog ids and the first occurrence wins.
        A `patientAge` entry is lifted out into `patient_age` unless an age
        was passed explicitly.
        """
        biomarker_entries: List[Tuple[str, float]] = []
        for name, value in entries:
            if name == AGE_FIELD:
                if patient_age is None:
                    patient_age = value
                continue
            biomarker_entries.append((name, value))

        values = deduplicate_entries(biomarker_entries)
        logger.debug(f"[SNAPSHOT] Built snapshot with {len(values)} values, age={patient_age}")
        return cls(values=values, patient_age=patient_age)

    def with_calculated(self) -> "BiomarkerSnapshot":
        """Return a new snapshot including derived biomarkers; measured values win."""
        return self.model_copy(update={"values": merge_with_calculated(self.values)})

    def known_values(self) -> Dict[str, float]:
        """Only the values whose key is a catalog id."""
        return {key: value for key, value in self.values.items() if key in BIOMARKER_REFERENCES}

    def records(self) -> List[BiomarkerRecord]:
        """Measured catalog values followed by calculated ones, as display records."""
        measured = []
        for key, value in self.known_values().items():
            ref = lookup(key)
            measured.append(
                BiomarkerRecord(
                    id=ref.id,
                    name=ref.display_name,
                    value=value,
                    unit=ref.unit,
                    category=ref.category.value,
                    source="measured",
                )
            )
        return combine_measured_and_calculated(measured)
