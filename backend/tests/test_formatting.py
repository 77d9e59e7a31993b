"""Tests for Rupiah and volume formatting helpers."""

from __future__ import annotations

import pytest

from balirab.formatting import format_rupiah, format_rupiah_short, format_volume


class TestFormatRupiah:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (51_948_000, "Rp 51.948.000"),
            (1_234_567, "Rp 1.234.567"),
            (15_000, "Rp 15.000"),
            (950, "Rp 950"),
            (0, "Rp 0"),
            (999.6, "Rp 1.000"),
            (1_450_000.4, "Rp 1.450.000"),
        ],
    )
    def test_whole_rupiah(self, amount: float, expected: str) -> None:
        assert format_rupiah(amount) == expected

    def test_negative(self) -> None:
        assert format_rupiah(-5_000) == "-Rp 5.000"

    def test_negative_rounding_to_zero_has_no_sign(self) -> None:
        assert format_rupiah(-0.4) == "Rp 0"


class TestFormatRupiahShort:
    def test_billions(self) -> None:
        assert format_rupiah_short(1_234_000_000) == "Rp 1,2 M"

    def test_millions(self) -> None:
        assert format_rupiah_short(51_948_000) == "Rp 52 jt"

    def test_below_a_million(self) -> None:
        assert format_rupiah_short(950_000) == "Rp 950.000"

    def test_rounding_up_to_a_billion_switches_unit(self) -> None:
        assert format_rupiah_short(999_600_000) == "Rp 1,0 M"

    def test_just_below_the_switch_stays_in_millions(self) -> None:
        assert format_rupiah_short(950_000_000) == "Rp 950 jt"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (2_500_000, "Rp 3 jt"),
            (1_250_000_000, "Rp 1,3 M"),
        ],
    )
    def test_halves_round_up(self, amount: float, expected: str) -> None:
        assert format_rupiah_short(amount) == expected

    def test_negative_sign_before_symbol(self) -> None:
        assert format_rupiah_short(-2_500_000) == "-Rp 3 jt"
        assert format_rupiah_short(-1_234_000_000) == "-Rp 1,2 M"
        assert format_rupiah_short(-5_000) == "-Rp 5.000"

    def test_large_billions_grouped(self) -> None:
        assert format_rupiah_short(12_345_000_000_000) == "Rp 12.345,0 M"


class TestFormatVolume:
    @pytest.mark.parametrize(
        ("volume", "expected"),
        [
            (2.4, "2,4"),
            (100.0, "100"),
            (1234.5, "1.234,5"),
            (0.333, "0,33"),
            (0, "0"),
        ],
    )
    def test_volume(self, volume: float, expected: str) -> None:
        assert format_volume(volume) == expected
