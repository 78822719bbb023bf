# tests/test_rules.py

import pytest

from calfields import (
    DAY_OF_MONTH,
    MONTH_OF_YEAR,
    YEAR,
    FieldRule,
    FieldValue,
    IllegalFieldValueError,
    MissingArgumentError,
    RuleId,
)
from calfields.core.rules import rule_for


def test_rule_ranges():
    assert (MONTH_OF_YEAR.minimum, MONTH_OF_YEAR.maximum) == (1, 12)
    assert (DAY_OF_MONTH.minimum, DAY_OF_MONTH.maximum) == (1, 31)
    assert (YEAR.minimum, YEAR.maximum) == (1, 9999)
    assert MONTH_OF_YEAR.name == "month-of-year"


def test_rule_rejects_inverted_range():
    with pytest.raises(ValueError):
        FieldRule(RuleId.DAY_OF_MONTH, 5, 4)


def test_rules_are_identity_compared():
    twin = FieldRule(RuleId.MONTH_OF_YEAR, 1, 12)
    assert twin != MONTH_OF_YEAR
    assert rule_for(RuleId.MONTH_OF_YEAR) is MONTH_OF_YEAR


@pytest.mark.parametrize("value", [1, 15, 31])
def test_validate_in_range(value):
    fv = DAY_OF_MONTH.validate(value)
    assert fv.rule is DAY_OF_MONTH
    assert fv.value == value


@pytest.mark.parametrize("rule, value", [(MONTH_OF_YEAR, 0), (MONTH_OF_YEAR, 13), (DAY_OF_MONTH, 0), (DAY_OF_MONTH, 32)])
def test_validate_out_of_range(rule, value):
    with pytest.raises(IllegalFieldValueError) as ei:
        rule.validate(value)
    assert ei.value.rule is rule
    assert ei.value.value == value


def test_field_value_checks_on_construction():
    with pytest.raises(IllegalFieldValueError):
        FieldValue(MONTH_OF_YEAR, 13)
    with pytest.raises(MissingArgumentError):
        FieldValue(MONTH_OF_YEAR, None)


@pytest.mark.parametrize("value", [2.5, 2.0, "2"])
def test_field_value_rejects_non_integers(value):
    with pytest.raises(IllegalFieldValueError) as ei:
        FieldValue(DAY_OF_MONTH, value)
    assert ei.value.rule is DAY_OF_MONTH
    assert not DAY_OF_MONTH.is_valid_value(value)


def test_field_value_stores_plain_int():
    fv = FieldValue(MONTH_OF_YEAR, True)
    assert type(fv.value) is int
    assert fv == MONTH_OF_YEAR.validate(1)


def test_field_value_is_immutable():
    fv = MONTH_OF_YEAR.validate(3)
    with pytest.raises(AttributeError):
        fv.value = 4


def test_field_value_equality_uses_rule():
    assert MONTH_OF_YEAR.validate(6) == MONTH_OF_YEAR.validate(6)
    assert MONTH_OF_YEAR.validate(6) != DAY_OF_MONTH.validate(6)
    assert hash(MONTH_OF_YEAR.validate(6)) == hash(MONTH_OF_YEAR.validate(6))


def test_compare_same_rule():
    a, b = DAY_OF_MONTH.validate(3), DAY_OF_MONTH.validate(9)
    assert DAY_OF_MONTH.compare(a, b) < 0
    assert DAY_OF_MONTH.compare(b, a) > 0
    assert DAY_OF_MONTH.compare(a, a) == 0
    assert a < b and b >= a


def test_compare_different_rules_fails_fast():
    with pytest.raises(TypeError):
        DAY_OF_MONTH.compare(DAY_OF_MONTH.validate(3), MONTH_OF_YEAR.validate(3))
    with pytest.raises(TypeError):
        DAY_OF_MONTH.validate(3) < MONTH_OF_YEAR.validate(3)
