"""Tests for the fare rule pipeline."""

import pytest

from train_fare.application import apply_rule, apply_rules, parse_fare_amount
from train_fare.domain.errors import InvalidFareAmountError
from train_fare.domain.models import DistanceRule, OtherRule, VipRule


def test_distance_rule_adds_distance_times_rate() -> None:
    """Given a base fare of 3 and 4.2 km at rate 0.5, when applying, then 5.1 is returned."""
    rule = DistanceRule(distance_km=4.2, increment_rate=0.5)

    assert apply_rule(rule, 3.0) == pytest.approx(5.1)


def test_vip_rule_multiplies() -> None:
    """Given a fare of 5.0 and discount 0.8, when applying, then 4.0 is returned."""
    assert apply_rule(VipRule(discount_factor=0.8), 5.0) == pytest.approx(4.0)


def test_vip_rule_with_factor_one_is_identity() -> None:
    """Given discount factor 1, when applying, then the fare is unchanged."""
    assert apply_rule(VipRule(discount_factor=1.0), 7.35) == 7.35


def test_other_rule_adds_fee() -> None:
    """Given a total of 4.0 and a 2.5 surcharge, when applying, then 6.5 is returned."""
    rule = OtherRule(name="festival surcharge", additional_fare=2.5)

    assert apply_rule(rule, 4.0) == pytest.approx(6.5)


def test_other_rule_with_zero_fee_is_identity() -> None:
    """Given an additional fare of 0, when applying, then the fare is unchanged."""
    assert apply_rule(OtherRule(name="none", additional_fare=0.0), 4.2) == 4.2


def test_unknown_rule_raises_type_error() -> None:
    """Given something that is not a fare rule, when applying, then TypeError is raised."""
    with pytest.raises(TypeError, match="Unsupported fare rule"):
        apply_rule("discount", 1.0)  # type: ignore[arg-type]


def test_apply_rules_threads_running_total() -> None:
    """Given all three rules, when applying in order, then each step starts from the previous output."""
    steps = apply_rules(
        [
            DistanceRule(distance_km=4.2, increment_rate=0.5),
            VipRule(discount_factor=0.8),
            OtherRule(name="festival surcharge", additional_fare=2.5),
        ],
        3.0,
    )

    assert [s.amount_before for s in steps] == pytest.approx([3.0, 5.1, 4.08])
    assert [s.amount_after for s in steps] == pytest.approx([5.1, 4.08, 6.58])


def test_apply_rules_without_rules_is_empty() -> None:
    """Given no rules, when applying, then no steps are recorded."""
    assert apply_rules([], 3.0) == []


@pytest.mark.parametrize("text, expected", [("2.5", 2.5), (" 3 ", 3.0), ("-1", -1.0), ("1e1", 10.0)])
def test_parse_fare_amount_accepts_numbers(text: str, expected: float) -> None:
    """Given numeric text, when parsing, then the float value is returned."""
    assert parse_fare_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "2,5", "nan", "inf", "2.5 yuan"])
def test_parse_fare_amount_rejects_non_numbers(text: str) -> None:
    """Given non-numeric text, when parsing, then InvalidFareAmountError is raised."""
    with pytest.raises(InvalidFareAmountError):
        parse_fare_amount(text)
