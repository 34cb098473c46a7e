"""Unit tests for the shipment field validators."""

import pytest

from shipments.domain.exceptions import ValidationError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.validation import (
    date_problem,
    is_valid_category,
    is_valid_date,
    is_valid_quantity,
    validate_shipment,
)


class TestIsValidDate:

    def test_well_formed_date_accepted(self):
        assert is_valid_date("2024-01-01")

    def test_month_thirteen_rejected(self):
        assert not is_valid_date("2024-13-01")
        assert date_problem("2024-13-01") == "month"

    def test_missing_separators_rejected(self):
        assert not is_valid_date("20240101")
        assert date_problem("20240101") == "length"

    def test_wrong_separator_rejected(self):
        assert date_problem("2024/01/01") == "separator"

    def test_letter_in_digits_rejected(self):
        assert date_problem("2024-0a-01") == "digit"

    def test_non_ascii_digit_rejected(self):
        assert date_problem("2024-01-0١") == "digit"

    def test_day_zero_and_thirty_two_rejected(self):
        assert date_problem("2024-01-00") == "day"
        assert date_problem("2024-01-32") == "day"

    def test_month_zero_rejected(self):
        assert date_problem("2024-00-10") == "month"

    def test_day_not_checked_against_month_length(self):
        # Only the format is checked: February 31st passes.
        assert is_valid_date("2024-02-31")

    def test_empty_string_rejected(self):
        assert not is_valid_date("")


class TestCategoryAndQuantity:

    @pytest.mark.parametrize("value", [0, 5, 9])
    def test_category_in_range(self, value):
        assert is_valid_category(value)

    @pytest.mark.parametrize("value", [-1, 10])
    def test_category_out_of_range(self, value):
        assert not is_valid_category(value)

    def test_quantity_must_be_positive(self):
        assert is_valid_quantity(1)
        assert not is_valid_quantity(0)
        assert not is_valid_quantity(-3)


class TestValidateShipment:

    def test_builds_shipment(self):
        shipment = validate_shipment(3, 40, "2025-06-30", 17)
        assert shipment == Shipment(category=3, quantity=40, expiry_date="2025-06-30", supplier_id=17)

    def test_bad_category_rejected(self):
        with pytest.raises(ValidationError, match="Category must be between 0 and 9"):
            validate_shipment(10, 40, "2025-06-30", 17)

    def test_bad_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Quantity must be positive"):
            validate_shipment(3, 0, "2025-06-30", 17)

    def test_bad_date_rejected(self):
        with pytest.raises(ValidationError, match="Invalid expiry date"):
            validate_shipment(3, 40, "2025-6-30", 17)

    def test_any_supplier_id_accepted(self):
        assert validate_shipment(0, 1, "2025-06-30", 123456).supplier_id == 123456
