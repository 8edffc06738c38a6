"""Tests for domain models."""

import pytest

from train_fare.domain.errors import InvalidFareAmountError, StationNotFoundError
from train_fare.domain.models import (
    DistanceRule,
    DistanceTable,
    FareQuote,
    FareStep,
    OtherRule,
    StationSegment,
    VipRule,
)


def test_station_segment_is_frozen() -> None:
    """Given a StationSegment, when trying to modify it, then raises AttributeError."""
    segment = StationSegment(station_id="1s", segment_km=1.8)

    with pytest.raises(AttributeError):
        segment.segment_km = 2.0  # type: ignore[misc]


def test_distance_table_from_pairs_keeps_order() -> None:
    """Given station pairs, when building a table, then ids keep travel order."""
    table = DistanceTable.from_pairs([("b", 1.0), ("a", 2.0), ("c", 0.5)])

    assert table.station_ids == ("b", "a", "c")
    assert len(table) == 3
    assert table.segments[1] == StationSegment("a", 2.0)


def test_distance_table_index_of_is_case_sensitive(small_table: DistanceTable) -> None:
    """Given a table, when looking up ids, then only exact matches are found."""
    assert small_table.index_of("2s") == 1
    assert small_table.index_of("2S") is None
    assert small_table.index_of(" 2s") is None
    assert small_table.contains("3s")
    assert not small_table.contains("4s")


def test_fare_quote_total_is_last_step() -> None:
    """Given a quote with steps, when reading total, then the last step output is returned."""
    distance = DistanceRule(distance_km=4.2, increment_rate=1.0)
    vip = VipRule(discount_factor=0.5)
    quote = FareQuote(
        origin="1s",
        destination="3s",
        distance_km=4.2,
        base_fare=3.0,
        steps=(
            FareStep(rule=distance, amount_before=3.0, amount_after=7.2),
            FareStep(rule=vip, amount_before=7.2, amount_after=3.6),
        ),
    )

    assert quote.total == pytest.approx(3.6)
    assert quote.distance_fare == pytest.approx(7.2)
    assert quote.vip_step is not None
    assert quote.vip_step.rule == vip
    assert quote.other_step is None


def test_fare_quote_without_steps_is_base_fare() -> None:
    """Given a quote with no steps, when reading total, then the base fare is returned."""
    quote = FareQuote(origin="1s", destination="1s", distance_km=0.0, base_fare=3.0)

    assert quote.total == 3.0
    assert quote.distance_fare == 3.0


def test_station_not_found_error_lists_known_stations() -> None:
    """Given an unknown station, when building the error, then message names it and the known ones."""
    error = StationNotFoundError("9s", ("1s", "2s"))

    assert error.station_id == "9s"
    assert "9s" in str(error)
    assert "1s, 2s" in str(error)


def test_invalid_fare_amount_error_is_value_error() -> None:
    """Given a bad amount, when raising InvalidFareAmountError, then it is also a ValueError."""
    error = InvalidFareAmountError("abc")

    assert isinstance(error, ValueError)
    assert error.raw_value == "abc"


def test_other_rule_carries_name() -> None:
    """Given an OtherRule, when created, then name and amount are kept."""
    rule = OtherRule(name="festival surcharge", additional_fare=2.5)

    assert rule.name == "festival surcharge"
    assert rule.additional_fare == 2.5


def test_fare_quote_is_hashable_and_immutable() -> None:
    """Given a quote, when hashing or changing its steps, then it behaves as an immutable value."""
    step = FareStep(rule=VipRule(discount_factor=0.8), amount_before=5.0, amount_after=4.0)
    quote = FareQuote(origin="1s", destination="2s", distance_km=3.0, base_fare=3.0, steps=(step,))

    assert hash(quote) == hash(
        FareQuote(origin="1s", destination="2s", distance_km=3.0, base_fare=3.0, steps=(step,))
    )
    assert isinstance(quote.steps, tuple)
    with pytest.raises(AttributeError):
        quote.steps.append(step)  # type: ignore[attr-defined]
