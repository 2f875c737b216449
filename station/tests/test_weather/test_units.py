"""Tests for temperature scale conversion and scale parsing."""

import itertools
import logging

import pytest

from station.models.common import TemperatureScale
from station.weather.units import convert, parse_scale, scale_label, to_celsius

SCALES = list(TemperatureScale)


class TestConvert:
    def test_celsius_examples(self):
        assert convert(30.0, "Celsius", "Fahrenheit") == pytest.approx(86.0)
        assert convert(30.0, "Celsius", "Kelvin") == pytest.approx(303.15)

    def test_fahrenheit_examples(self):
        assert convert(212.0, "Fahrenheit", "Celsius") == pytest.approx(100.0)
        assert convert(32.0, "Fahrenheit", "Kelvin") == pytest.approx(273.15)

    def test_kelvin_examples(self):
        assert convert(0.0, "Kelvin", "Celsius") == pytest.approx(-273.15)
        assert convert(0.0, "Kelvin", "Fahrenheit") == pytest.approx(-459.67)

    @pytest.mark.parametrize("scale", SCALES)
    def test_same_scale_is_identity(self, scale: TemperatureScale):
        for v in (-40.0, 0.0, 0.1, 36.6, 1e6):
            assert convert(v, scale, scale) == v

    @pytest.mark.parametrize("a,b", list(itertools.permutations(SCALES, 2)))
    def test_round_trip(self, a: TemperatureScale, b: TemperatureScale):
        for v in (-40.0, -10.0, 0.0, 25.0, 303.15):
            assert convert(convert(v, a, b), b, a) == pytest.approx(v)

    def test_unknown_scale_treated_as_celsius(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert convert(30.0, "Rankine", "Fahrenheit") == pytest.approx(86.0)
        assert "Invalid temperature scale" in caplog.text

    def test_to_celsius(self):
        assert to_celsius(86.0, TemperatureScale.FAHRENHEIT) == pytest.approx(30.0)


class TestParseScale:
    def test_names_case_insensitive(self):
        assert parse_scale("fahrenheit") == TemperatureScale.FAHRENHEIT
        assert parse_scale(" KELVIN ") == TemperatureScale.KELVIN

    def test_symbols(self):
        assert parse_scale("C") == TemperatureScale.CELSIUS
        assert parse_scale("f") == TemperatureScale.FAHRENHEIT
        assert parse_scale("K") == TemperatureScale.KELVIN

    def test_enum_passthrough(self):
        assert parse_scale(TemperatureScale.KELVIN) is TemperatureScale.KELVIN

    def test_invalid_defaults_to_celsius(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_scale("nope") == TemperatureScale.CELSIUS
        assert "nope" in caplog.text

    def test_labels(self):
        assert scale_label("Celsius") == "°C"
        assert scale_label("Fahrenheit") == "°F"
        assert scale_label("Kelvin") == "K"
