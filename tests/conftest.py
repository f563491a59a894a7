from __future__ import annotations

import pytest

from energy_records.models import EnergyProducer, EnergyRecord, EnergySource
from energy_records.store import RecordStore


def _make_record(
    *,
    year: int = 2010,
    month: int = 6,
    state: str | None = "CA",
    source: EnergySource = EnergySource.SOLAR,
    producer: EnergyProducer = EnergyProducer.RENEWABLE_ENERGY_COMPANIES,
    amount: float = 1000.0,
) -> EnergyRecord:
    return EnergyRecord(
        year=year,
        month=month,
        state=state,
        source=source,
        producer=producer,
        amount=amount,
    )


@pytest.fixture
def sample_store() -> RecordStore:
    return RecordStore.with_sample_data()


@pytest.fixture
def empty_store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def make_record():
    return _make_record
