"""Tests for px detection and scaling."""

import pytest

from pxmedia.transforms.scaling import format_number, has_px, scale_px, to_fixed


# ---------------------------------------------------------------------------
# has_px
# ---------------------------------------------------------------------------


class TestHasPx:
    @pytest.mark.parametrize("value", ["10px", "0px", "1px solid #eee", "calc(100% - 20px)"])
    def test_detects_lengths(self, value: str) -> None:
        assert has_px(value)

    @pytest.mark.parametrize("value", ["100%", "100vw", "auto", "fixed", "px", "1.5rem"])
    def test_ignores_other_values(self, value: str) -> None:
        assert not has_px(value)


# ---------------------------------------------------------------------------
# scale_px
# ---------------------------------------------------------------------------


class TestScalePx:
    def test_single_length(self) -> None:
        assert scale_px("200px", 600 / 750) == "160.000px"

    def test_rounds_to_three_decimals(self) -> None:
        assert scale_px("200px", 425 / 750) == "113.333px"

    def test_shorthand_scales_every_token(self) -> None:
        assert scale_px("10px 20px 0 5px", 0.5) == "5.000px 10.000px 0 2.500px"

    def test_keeps_surrounding_text(self) -> None:
        assert scale_px("1px solid #eee", 2) == "2.000px solid #eee"
        assert scale_px("calc(100% - 20px)", 0.8) == "calc(100% - 16.000px)"

    def test_negative_sign_preserved(self) -> None:
        assert scale_px("-10px", 0.8) == "-8.000px"

    def test_decimal_number_scaled_as_one(self) -> None:
        assert scale_px("1.5px", 0.8) == "1.200px"

    def test_multi_digit_run_is_one_number(self) -> None:
        assert scale_px("750px", 0.8) == "600.000px"

    def test_value_without_px_unchanged(self) -> None:
        assert scale_px("100%", 0.8) == "100%"

    def test_exact_tie_rounds_up(self) -> None:
        assert scale_px("1px", 0.0625) == "0.063px"
        assert scale_px("3px", 0.125) == "0.375px"
        assert scale_px("1px", 0.3125) == "0.313px"


class TestToFixed:
    def test_pads_to_three_decimals(self) -> None:
        assert to_fixed(8) == "8.000"

    def test_tie_rounds_away_from_zero(self) -> None:
        assert to_fixed(0.0625) == "0.063"
        assert to_fixed(-0.0625) == "-0.063"

    def test_non_tie_rounds_to_nearest(self) -> None:
        assert to_fixed(113.33333333333334) == "113.333"
        assert to_fixed(0.0006) == "0.001"


# ---------------------------------------------------------------------------
# format_number
# ---------------------------------------------------------------------------


class TestFormatNumber:
    def test_int(self) -> None:
        assert format_number(600) == "600"

    def test_integral_float(self) -> None:
        assert format_number(600.0) == "600"

    def test_fractional_float(self) -> None:
        assert format_number(425.5) == "425.5"
