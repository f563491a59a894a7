from __future__ import annotations

from collections import Counter, defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from .models import EnergyProducer, EnergyRecord, EnergySource

ProducerTotal = Tuple[EnergyProducer, float]


def distinct_sources(records: Iterable[EnergyRecord]) -> Set[EnergySource]:
    """Sources that appear in at least one record."""

    return {record.source for record in records}


def total_by_producer(records: Iterable[EnergyRecord]) -> List[ProducerTotal]:
    """Sum amounts per producer, largest total first.

    Equal totals keep the producer declaration order.
    """

    totals: Dict[EnergyProducer, float] = defaultdict(float)
    for record in records:
        totals[record.producer] += record.amount
    order = _declaration_order(EnergyProducer)
    return sorted(totals.items(), key=lambda item: (-item[1], order[item[0]]))


def min_by_state(records: Iterable[EnergyRecord]) -> Dict[str, float]:
    return _reduce_by_state(records, min)


def max_by_state(records: Iterable[EnergyRecord]) -> Dict[str, float]:
    return _reduce_by_state(records, max)


def most_used_source(records: Iterable[EnergyRecord]) -> Optional[EnergySource]:
    """Source with the most records, or None when there are no records.

    Equal counts resolve to the source declared first.
    """

    counts = Counter(record.source for record in records)
    if not counts:
        return None
    order = _declaration_order(EnergySource)
    return min(counts, key=lambda source: (-counts[source], order[source]))


def total_by_state_for_month(records: Iterable[EnergyRecord], month: int) -> Dict[str, float]:
    """Sum amounts per state over records of ``month``; unknown months give {}."""

    totals: Dict[str, float] = defaultdict(float)
    for record in records:
        if record.month == month:
            totals[record.state] += record.amount
    return dict(totals)


def _reduce_by_state(
    records: Iterable[EnergyRecord],
    pick: Callable[[float, float], float],
) -> Dict[str, float]:
    result: Dict[str, float] = {}
    for record in records:
        current = result.get(record.state)
        result[record.state] = record.amount if current is None else pick(current, record.amount)
    return result


def _declaration_order(enum_cls) -> Dict[object, int]:
    return {member: index for index, member in enumerate(enum_cls)}
