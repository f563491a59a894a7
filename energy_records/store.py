from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .models import EnergyProducer, EnergyRecord, EnergySource, ValidationError

logger = logging.getLogger(__name__)

MIN_YEAR = 2001
MAX_YEAR = 2022

SAMPLE_RECORDS: Tuple[EnergyRecord, ...] = (
    EnergyRecord(2001, 1, "AK", EnergySource.COAL, EnergyProducer.ELECTRIC_UTILITIES, 46903.0),
    EnergyRecord(
        2001, 2, "AK", EnergySource.NATURAL_GAS, EnergyProducer.INDEPENDENT_POWER_PRODUCERS, 36500.0
    ),
    EnergyRecord(2002, 1, "AK", EnergySource.WIND, EnergyProducer.COMBINED_HEAT_AND_POWER, 90.0),
    EnergyRecord(
        2001, 1, "CA", EnergySource.HYDROELECTRIC, EnergyProducer.INDEPENDENT_POWER_PRODUCERS, 102000.0
    ),
    EnergyRecord(2002, 1, "CA", EnergySource.SOLAR, EnergyProducer.RENEWABLE_ENERGY_COMPANIES, 3000.0),
)


class RecordStore:
    """Append-only, insertion-ordered collection of validated records."""

    def __init__(self, records: Iterable[EnergyRecord] = ()) -> None:
        self._records: List[EnergyRecord] = []
        for record in records:
            self.add(record)

    @classmethod
    def with_sample_data(cls) -> "RecordStore":
        return cls(SAMPLE_RECORDS)

    def add(self, record: EnergyRecord | None) -> None:
        """Validate ``record`` and append it.

        Checks run in a fixed order and the first failure wins, so the error
        always names exactly one broken rule. The store is untouched on failure.
        """

        try:
            _validate(record)
        except ValidationError as exc:
            logger.info("Rejected energy record %r: %s", record, exc)
            raise
        self._records.append(record)
        logger.debug("Added energy record %r", record)

    def all(self) -> Tuple[EnergyRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EnergyRecord]:
        return iter(self.all())


def _validate(record: EnergyRecord | None) -> None:
    if record is None:
        raise ValidationError("Energy data cannot be null")
    if not record.amount > 0:
        raise ValidationError("Energy amount must be greater than 0")
    if record.month < 1 or record.month > 12:
        raise ValidationError("Month must be between 1 and 12")
    if record.year < MIN_YEAR or record.year > MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    if record.state is None or not record.state.strip():
        raise ValidationError("State cannot be empty")
