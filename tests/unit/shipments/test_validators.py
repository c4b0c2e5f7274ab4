from decimal import Decimal

import pytest

from modules.shipments.validators import is_valid_idn, is_valid_price

pytestmark = pytest.mark.unit


class TestIsValidPrice:
    @pytest.mark.parametrize(
        "value",
        [
            Decimal("0.01"),
            Decimal("1"),
            Decimal("120000.10"),
            Decimal("999999999999.99"),
            Decimal("1.500"),  # trailing zeros are not extra precision
            Decimal("1E+3"),
        ],
    )
    def test_valid(self, value):
        assert is_valid_price(value)

    @pytest.mark.parametrize(
        "value",
        [
            Decimal("0"),
            Decimal("-0.01"),
            Decimal("-5"),
            Decimal("0.001"),
            Decimal("10.005"),
            Decimal("1000000000000"),
            Decimal("NaN"),
            Decimal("Infinity"),
        ],
    )
    def test_invalid(self, value):
        assert not is_valid_price(value)


class TestIsValidIdn:
    def test_twelve_ascii_digits(self):
        assert is_valid_idn("123456789012")

    @pytest.mark.parametrize("value", ["", "1234", "12345678901a", "１２３４５６７８９０１２"])
    def test_invalid(self, value):
        assert not is_valid_idn(value)
