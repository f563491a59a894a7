"""In-memory energy production records with validation and aggregation queries."""

from .aggregates import (
    distinct_sources,
    max_by_state,
    min_by_state,
    most_used_source,
    total_by_producer,
    total_by_state_for_month,
)
from .models import EnergyProducer, EnergyRecord, EnergySource, ParseError, ValidationError
from .parsing import (
    InputFormatError,
    RecordInputError,
    parse_record_fields,
    read_record_from_form,
    seed_store,
)
from .reporting import StateExtremes, record_rows, state_extremes
from .store import SAMPLE_RECORDS, RecordStore

__all__ = [
    "distinct_sources",
    "EnergyProducer",
    "EnergyRecord",
    "EnergySource",
    "InputFormatError",
    "max_by_state",
    "min_by_state",
    "most_used_source",
    "parse_record_fields",
    "ParseError",
    "read_record_from_form",
    "record_rows",
    "RecordInputError",
    "RecordStore",
    "SAMPLE_RECORDS",
    "seed_store",
    "state_extremes",
    "StateExtremes",
    "total_by_producer",
    "total_by_state_for_month",
    "ValidationError",
]
