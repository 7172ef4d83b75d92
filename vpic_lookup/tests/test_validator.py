from datetime import date

import pytest

from vpic_lookup.services import validator

VIN = "1FTFW1ET5DFC10312"
THIS_YEAR = date.today().year


class TestDecodeEligibility:
    @pytest.mark.parametrize("vin", ["", "1FTFW1ET5DFC1031", "1FTFW1ET5DFC103122", None, 12345678901234567])
    def test_vin_must_be_17_characters(self, vin):
        assert not validator.can_decode(vin)

    def test_valid_vin_without_year(self):
        assert validator.can_decode(VIN)
        assert validator.can_decode(VIN, 0)
        assert validator.can_decode(VIN, None)

    @pytest.mark.parametrize("year", [1950, 2000, THIS_YEAR, THIS_YEAR + 2])
    def test_year_inside_bounds(self, year):
        assert validator.can_decode(VIN, year)

    @pytest.mark.parametrize("year", [1949, -1, THIS_YEAR + 3])
    def test_year_outside_bounds(self, year):
        assert not validator.can_decode(VIN, year)
        assert "Model year" in validator.decode_rejection(VIN, year)

    def test_year_must_be_an_int(self):
        assert not validator.can_decode(VIN, "2015")
        assert not validator.can_decode(VIN, True)

    def test_rejection_reason_for_short_vin(self):
        assert validator.decode_rejection("ABC") == "VIN must be exactly 17 characters"
        assert validator.decode_rejection(VIN) is None


class TestRecallEligibility:
    def test_valid_lookup(self):
        assert validator.can_lookup_recalls(2015, "FORD", "F-150")

    def test_year_is_required(self):
        assert not validator.can_lookup_recalls(0, "FORD", "F-150")
        assert not validator.can_lookup_recalls(None, "FORD", "F-150")

    @pytest.mark.parametrize("year", [1949, THIS_YEAR + 3])
    def test_year_outside_bounds(self, year):
        assert not validator.can_lookup_recalls(year, "FORD", "F-150")

    @pytest.mark.parametrize("make,model", [("KI", "SOUL"), ("KIA", "Q7"), ("", "CIVIC"), ("HONDA", ""), (None, "CIVIC")])
    def test_make_and_model_need_three_characters(self, make, model):
        assert not validator.can_lookup_recalls(2015, make, model)

    def test_rejection_reasons(self):
        assert validator.recall_rejection(2015, "KI", "SOUL") == "Make must be at least 3 characters"
        assert validator.recall_rejection(2015, "KIA", "K5") == "Model must be at least 3 characters"


def test_upper_bound_follows_the_clock(monkeypatch):
    monkeypatch.setattr(validator, "current_year", lambda: 2040)
    assert validator.max_model_year() == 2042
    assert validator.can_decode(VIN, 2042)
    assert not validator.can_decode(VIN, 2043)
