"""
Validation Helper Tests
"""

import pytest

from hackernews.graphql.errors import ValidationError
from hackernews.graphql.validation import apply_take_constraints, parse_int_safe


class TestParseIntSafe:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", 0),
            ("7", 7),
            ("0042", 42),
            ("123456789", 123456789),
            ("2147483647", 2147483647),
        ],
    )
    def test_digit_strings(self, value, expected):
        assert parse_int_safe(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "abc",
            "-1",
            "+1",
            "1.5",
            " 1",
            "1 ",
            "1\n",
            "1e3",
            "٣",  # non-ASCII digit
            "2147483648",
            "99999999999999999999",
        ],
    )
    def test_rejected_values(self, value):
        assert parse_int_safe(value) is None


class TestApplyTakeConstraints:
    @pytest.mark.parametrize("value", [1, 25, 50])
    def test_inside_bounds(self, value):
        assert apply_take_constraints(value, min=1, max=50) == value

    @pytest.mark.parametrize("value", [0, 51, -1])
    def test_outside_bounds(self, value):
        with pytest.raises(ValidationError) as exc_info:
            apply_take_constraints(value, min=1, max=50)

        assert str(exc_info.value) == (
            f"'take' argument value '{value}' is outside the valid range of '1' to '50'"
        )
