from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ValidationError(ValueError):
    """Raised when a record breaks one of the store invariants."""


class ParseError(ValueError):
    """Raised when free text does not name a known source or producer."""


class _DisplayEnum(Enum):
    """Enum whose value is the canonical display string."""

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _lookup(cls) -> Dict[str, "_DisplayEnum"]:
        return {member.value.casefold(): member for member in cls}

    @classmethod
    def _parse(cls, text: str, label: str):
        member = cls._lookup().get(text.casefold()) if isinstance(text, str) else None
        if member is None:
            raise ParseError(f"Invalid energy {label}: {text}")
        return member


class EnergySource(_DisplayEnum):
    COAL = "Coal"
    NATURAL_GAS = "Natural Gas"
    WIND = "Wind"
    SOLAR = "Solar"
    HYDROELECTRIC = "Hydroelectric"

    @classmethod
    def parse(cls, text: str) -> "EnergySource":
        """Match ``text`` case-insensitively against the display names."""

        return cls._parse(text, "source")


class EnergyProducer(_DisplayEnum):
    ELECTRIC_UTILITIES = "Electric Utilities"
    INDEPENDENT_POWER_PRODUCERS = "Independent Power Producers"
    COMBINED_HEAT_AND_POWER = "Combined Heat and Power"
    NUCLEAR_POWER_PLANTS = "Nuclear Power Plants"
    RENEWABLE_ENERGY_COMPANIES = "Renewable Energy Companies"
    HYDROELECTRIC_FACILITIES = "Hydroelectric Facilities"
    FOSSIL_FUEL_PLANTS = "Fossil Fuel Plants"
    GEOTHERMAL_PLANTS = "Geothermal Plants"

    @classmethod
    def parse(cls, text: str) -> "EnergyProducer":
        """Match ``text`` case-insensitively against the display names."""

        return cls._parse(text, "producer")


@dataclass(frozen=True)
class EnergyRecord:
    """One monthly energy-production observation for a state."""

    year: int
    month: int
    state: str
    source: EnergySource
    producer: EnergyProducer
    amount: float
