import dataclasses

import pytest

from energy_records.models import EnergyProducer, EnergySource, ParseError


@pytest.mark.parametrize("text", ["solar", "SOLAR", "Solar", "sOlAr"])
def test_source_parse_is_case_insensitive(text):
    assert EnergySource.parse(text) is EnergySource.SOLAR


def test_source_parse_multi_word_name():
    assert EnergySource.parse("natural gas") is EnergySource.NATURAL_GAS


def test_source_parse_rejects_unknown_text():
    with pytest.raises(ParseError, match="Nonexistent"):
        EnergySource.parse("Nonexistent")


@pytest.mark.parametrize("text", ["Sol", "Solar ", "", "solar power"])
def test_source_parse_requires_exact_match(text):
    with pytest.raises(ParseError):
        EnergySource.parse(text)


def test_producer_parse():
    assert (
        EnergyProducer.parse("combined heat and power")
        is EnergyProducer.COMBINED_HEAT_AND_POWER
    )
    with pytest.raises(ParseError, match="Invalid energy producer: Wind Farms"):
        EnergyProducer.parse("Wind Farms")


def test_display_name_round_trips_through_parse():
    for producer in EnergyProducer:
        assert EnergyProducer.parse(producer.display_name) is producer
    assert str(EnergySource.HYDROELECTRIC) == "Hydroelectric"


def test_record_is_immutable(make_record):
    record = make_record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.amount = 5.0
