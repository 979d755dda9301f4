"""Tests for ValidationRule and validate()."""

import math

import pytest

from prjboard.domain.validation import ValidationRule, validate, validate_all


class TestRequired:
    @pytest.mark.parametrize("value", ["", " ", "   \t\n"])
    def test_blank_text_fails(self, value: str) -> None:
        assert not validate(ValidationRule(value=value, required=True))

    def test_non_empty_text_passes(self) -> None:
        assert validate(ValidationRule(value="Build API", required=True))

    def test_number_is_stringified(self) -> None:
        """0 stringifies to "0", which is non-empty."""
        assert validate(ValidationRule(value=0, required=True))

    def test_not_required_blank_passes(self) -> None:
        assert validate(ValidationRule(value=""))


class TestLength:
    def test_min_length(self) -> None:
        assert not validate(ValidationRule(value="abcd", min_length=5))
        assert validate(ValidationRule(value="abcde", min_length=5))

    def test_max_length(self) -> None:
        assert validate(ValidationRule(value="abc", max_length=3))
        assert not validate(ValidationRule(value="abcd", max_length=3))

    def test_length_bounds_skip_numbers(self) -> None:
        assert validate(ValidationRule(value=12345, max_length=2))
        assert validate(ValidationRule(value=1, min_length=5))


class TestRange:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, False), (1, True), (5, True), (9, True), (10, False)],
    )
    def test_people_bounds(self, value: int, expected: bool) -> None:
        assert validate(ValidationRule(value=value, required=True, min=1, max=9)) is expected

    def test_float_values_are_numeric(self) -> None:
        assert validate(ValidationRule(value=1.5, min=1, max=9))
        assert not validate(ValidationRule(value=9.5, min=1, max=9))

    def test_nan_fails_bounds(self) -> None:
        assert not validate(ValidationRule(value=math.nan, required=True, min=1, max=9))

    def test_text_skips_numeric_bounds(self) -> None:
        """Type mismatch is permissive: the bound is skipped, no coercion."""
        assert validate(ValidationRule(value="100", min=1, max=9))
        assert validate(ValidationRule(value="0", min=1))

    def test_bool_is_not_numeric(self) -> None:
        assert validate(ValidationRule(value=False, min=1))


class TestCombined:
    def test_all_constraints_must_pass(self) -> None:
        rule = ValidationRule(value="ab", required=True, min_length=3, max_length=10)
        assert not validate(rule)

    def test_no_constraints_pass(self) -> None:
        assert validate(ValidationRule(value="anything"))

    def test_rule_is_frozen(self) -> None:
        rule = ValidationRule(value="x")
        with pytest.raises(AttributeError):
            rule.value = "y"  # type: ignore[misc]


class TestValidateAll:
    def test_all_pass(self) -> None:
        rules = [ValidationRule(value="a", required=True), ValidationRule(value=3, min=1, max=9)]
        assert validate_all(rules)

    def test_one_failure_fails(self) -> None:
        rules = [ValidationRule(value="", required=True), ValidationRule(value=3, min=1, max=9)]
        assert not validate_all(rules)

    def test_empty_passes(self) -> None:
        assert validate_all([])
