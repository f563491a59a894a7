from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set

from .aggregates import ProducerTotal, max_by_state, min_by_state
from .models import EnergyRecord, EnergySource


@dataclass(frozen=True)
class StateExtremes:
    state: str
    minimum: float
    maximum: float


def record_rows(records: Iterable[EnergyRecord]) -> List[list[object]]:
    """Table rows with display names, in insertion order."""

    return [
        [
            record.year,
            record.month,
            record.state,
            record.source.display_name,
            record.producer.display_name,
            record.amount,
        ]
        for record in records
    ]


def state_extremes(records: Iterable[EnergyRecord]) -> List[StateExtremes]:
    """Pair the minimum and maximum amount of each state."""

    records_list = list(records)
    minimums = min_by_state(records_list)
    maximums = max_by_state(records_list)
    return [
        StateExtremes(state=state, minimum=minimum, maximum=maximums[state])
        for state, minimum in minimums.items()
    ]


def format_sources(sources: Set[EnergySource]) -> List[str]:
    order = list(EnergySource)
    return [source.display_name for source in sorted(sources, key=order.index)]


def format_producer_totals(totals: Iterable[ProducerTotal]) -> List[dict[str, object]]:
    return [
        {"producer": producer.display_name, "total": total}
        for producer, total in totals
    ]
