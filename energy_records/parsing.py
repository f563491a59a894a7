from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, List, Mapping, Sequence, TypeVar

from .models import EnergyProducer, EnergyRecord, EnergySource, ParseError, ValidationError
from .store import RecordStore

logger = logging.getLogger(__name__)

SEED_FIELDS = ("state", "source", "amount", "month", "year", "producer")
STARTS_EMPTY = "The application will start without initial data."

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

T = TypeVar("T")


class InputFormatError(ValueError):
    """Raised when a numeric field does not hold a valid number."""

    def __init__(self, field: str, raw: object) -> None:
        super().__init__(f"Invalid number for {field}: {raw!r}")
        self.field = field


@dataclass(frozen=True)
class FieldError:
    code: str
    field: str
    message: str


class RecordInputError(Exception):
    def __init__(self, errors: List[FieldError]) -> None:
        super().__init__("Record input could not be parsed")
        self.errors = errors

    def has_number_errors(self) -> bool:
        return any(error.code == "invalid_number" for error in self.errors)

    def user_messages(self) -> List[dict[str, str]]:
        return [
            {"code": error.code, "field": error.field, "message": error.message}
            for error in self.errors
        ]


def parse_amount(raw: object) -> float:
    """Parse a plain decimal number; digit separators, nan and inf are rejected."""

    text = str(raw).strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InputFormatError("amount", raw)
    value = float(text)
    if not math.isfinite(value):
        raise InputFormatError("amount", raw)
    return value


def parse_int(raw: object, field: str) -> int:
    text = str(raw).strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise InputFormatError(field, raw)
    return int(text)


def parse_record_fields(
    state: str,
    source: str,
    amount: object,
    month: object,
    year: object,
    producer: str,
) -> EnergyRecord:
    """Turn six text fields into a record, reporting every bad field at once.

    Only the text is checked here; range rules belong to ``RecordStore.add``.
    """

    errors: List[FieldError] = []
    parsed_amount = _collect(errors, "amount", lambda: parse_amount(amount))
    parsed_month = _collect(errors, "month", lambda: parse_int(month, "month"))
    parsed_year = _collect(errors, "year", lambda: parse_int(year, "year"))
    parsed_source = _collect(errors, "source", lambda: EnergySource.parse(source))
    parsed_producer = _collect(errors, "producer", lambda: EnergyProducer.parse(producer))

    if errors:
        raise RecordInputError(errors)

    return EnergyRecord(
        year=parsed_year,
        month=parsed_month,
        state=state,
        source=parsed_source,
        producer=parsed_producer,
        amount=parsed_amount,
    )


def read_record_from_form(form: Mapping[str, object]) -> EnergyRecord:
    """Read one record from dict-like form data keyed by field name."""

    values = {name: form.get(name, "") for name in SEED_FIELDS}
    return parse_record_fields(
        state=str(values["state"]),
        source=str(values["source"]),
        amount=values["amount"],
        month=values["month"],
        year=values["year"],
        producer=str(values["producer"]),
    )


def seed_store(store: RecordStore, args: Sequence[str]) -> List[str]:
    """Add the optional start-up record given as positional arguments.

    Expects ``state source amount month year producer``. Problems are returned
    as operator messages and never raised; the store then keeps only what it
    already held.
    """

    if not args:
        return []
    if len(args) != len(SEED_FIELDS):
        return [
            _report(
                f"Incorrect number of command-line arguments: expected {len(SEED_FIELDS)}, "
                f"got {len(args)}. {STARTS_EMPTY}"
            )
        ]

    try:
        record = parse_record_fields(*args)
        store.add(record)
    except RecordInputError as exc:
        if exc.has_number_errors():
            return [_report(f"Invalid number format in command-line arguments. {STARTS_EMPTY}")]
        return [
            _report(f"Invalid energy data: {error.message}. {STARTS_EMPTY}")
            for error in exc.errors
        ]
    except ValidationError as exc:
        return [_report(f"Invalid energy data: {exc}. {STARTS_EMPTY}")]
    return []


def _collect(errors: List[FieldError], field: str, parse: Callable[[], T]) -> T | None:
    try:
        return parse()
    except InputFormatError as exc:
        errors.append(FieldError(code="invalid_number", field=field, message=str(exc)))
    except ParseError as exc:
        errors.append(FieldError(code="unknown_category", field=field, message=str(exc)))
    return None


def _report(message: str) -> str:
    logger.error(message)
    return message
