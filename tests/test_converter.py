"""Tests for MeasurementConverter dispatch and helpers."""

import itertools

import pytest

import measurement_converter
from measurement_converter.conversion import (
    Category,
    CategoryMismatchError,
    ConversionError,
    ConversionOptions,
    ConversionRequest,
    InvalidUnitError,
    MeasurementConverter,
    RoundingMode,
)
from measurement_converter.conversion.units import LINEAR_TABLES


class TestConvert:
    """Test category-aware conversion."""

    def test_km_to_m(self, converter):
        """Test km to m conversion and formula."""
        result = converter.convert(1, "km", "m")
        assert result.to_value == 1000
        assert result.formula == "(1 km) * (1000) / (1)"

    def test_kg_to_g(self, converter):
        """Test kg to g conversion."""
        assert converter.convert(1, "kg", "g").to_value == 1000

    def test_l_to_ml(self, converter):
        """Test l to ml conversion."""
        assert converter.convert(1, "l", "ml").to_value == 1000

    def test_mg_to_kg_formula(self, converter):
        """Small factors appear in fixed notation in the formula."""
        result = converter.convert(1, "mg", "kg")
        assert result.formula == "(1 mg) * (0.000001) / (1)"

    def test_mm2_to_m2_formula(self, converter):
        """Test mm2 factor in the formula."""
        result = converter.convert(1, "mm2", "m2")
        assert result.formula == "(1 mm2) * (0.000001) / (1)"

    def test_celsius_to_fahrenheit(self, converter):
        """Temperature units dispatch to the affine converter."""
        assert converter.convert(0, "C", "F").to_value == 32

    def test_kelvin_to_celsius(self, converter):
        """Test K to C conversion."""
        assert converter.convert(273.15, "K", "C").to_value == 0

    def test_mixed_case_linear(self, converter):
        """Mixed-case symbols resolve and are reported as given."""
        result = converter.convert(2, "KWh", "kJ")
        assert result.to_value == 7200
        assert result.from_unit == "KWh"

    def test_data_units_are_binary(self, converter):
        """Data units use 1024 multiples."""
        assert converter.convert(1, "gb", "mb").to_value == 1024

    def test_unsupported_unit(self, converter):
        """Unknown source unit."""
        with pytest.raises(InvalidUnitError, match="Unsupported unit: invalid"):
            converter.convert(1, "invalid", "m")

    def test_unknown_target(self, converter):
        """Unknown target unit."""
        with pytest.raises(InvalidUnitError):
            converter.convert(1, "m", "parsec")

    def test_cross_category_fails_fast(self, converter):
        """Length to weight is rejected."""
        with pytest.raises(CategoryMismatchError, match="different categories"):
            converter.convert(1, "km", "kg")

    def test_linear_to_temperature_fails(self, converter):
        """Length to temperature is rejected."""
        with pytest.raises(CategoryMismatchError):
            converter.convert(1, "m", "c")

    def test_temperature_to_linear_fails(self, converter):
        """Temperature to length is rejected."""
        with pytest.raises(InvalidUnitError):
            converter.convert(1, "c", "m")

    def test_options_precision(self, converter):
        """Precision option overrides the default."""
        result = converter.convert(1, "mile", "km", ConversionOptions(precision=1))
        assert result.to_value == 1.6
        assert result.precision == 1

    def test_options_rounding_mode(self, converter):
        """Rounding mode option overrides the default."""
        result = converter.convert(
            1, "mile", "km", ConversionOptions(precision=1, rounding_mode=RoundingMode.CEIL)
        )
        assert result.to_value == 1.7

    def test_options_rounding_mode_by_name(self, converter):
        """Rounding mode may be given by name."""
        result = converter.convert(1, "mile", "km", ConversionOptions(precision=1, rounding_mode="ceil"))
        assert result.to_value == 1.7

    def test_unknown_rounding_mode(self, converter):
        """Unknown rounding modes raise a conversion error, not ValueError."""
        with pytest.raises(ConversionError, match="Unknown rounding mode: half"):
            converter.convert(1, "km", "m", ConversionOptions(rounding_mode="half"))

    def test_unknown_default_rounding_mode(self):
        """Unknown default rounding mode is rejected at construction."""
        with pytest.raises(ConversionError, match="Unknown rounding mode"):
            MeasurementConverter(default_rounding_mode="half")

    def test_negative_precision(self, converter):
        """Negative precision is rejected."""
        with pytest.raises(ConversionError, match="Precision must be non-negative"):
            converter.convert(1, "km", "m", ConversionOptions(precision=-1))

    def test_non_finite_value(self, converter):
        """Infinite values cannot be rounded."""
        with pytest.raises(ConversionError, match="non-finite"):
            converter.convert(float("inf"), "km", "m")


class TestConversionProperties:
    """Test identity and round-trip laws."""

    @pytest.mark.parametrize("category", list(Category))
    def test_identity(self, converter, category):
        """Converting a unit to itself keeps the value."""
        for unit in converter.get_available_units(category):
            assert converter.convert(12.5, unit, unit).to_value == 12.5

    @pytest.mark.parametrize("category", list(LINEAR_TABLES))
    def test_round_trip(self, converter, category):
        """Converting there and back restores the value."""
        options = ConversionOptions(precision=12)
        common = converter.get_common_units(category)
        for u1, u2 in itertools.permutations(common, 2):
            there = converter.convert(1, u1, u2, options).to_value
            back = converter.convert(there, u2, u1, options).to_value
            assert back == pytest.approx(1, rel=1e-3), f"{u1} -> {u2} -> {u1}"

    def test_temperature_closure(self, converter):
        """C -> F -> K matches C -> K."""
        via_f = converter.convert(25, "c", "f").to_value
        assert converter.convert(via_f, "f", "k").to_value == pytest.approx(
            converter.convert(25, "c", "k").to_value, abs=1e-4
        )


class TestBatchConvert:
    """Test batch conversion."""

    def test_batch(self, converter):
        """Results come back in request order."""
        results = converter.batch_convert([
            ConversionRequest(value=1, from_unit="km", to_unit="m"),
            ConversionRequest(value=1, from_unit="kg", to_unit="g"),
        ])
        assert [r.to_value for r in results] == [1000, 1000]

    def test_request_precision_overrides_global(self, converter):
        """Per-request precision wins over the global option."""
        results = converter.batch_convert(
            [
                ConversionRequest(value=1, from_unit="mile", to_unit="km", precision=3),
                ConversionRequest(value=1, from_unit="mile", to_unit="km"),
            ],
            ConversionOptions(precision=1)
        )
        assert results[0].to_value == 1.609
        assert results[0].precision == 3
        assert results[1].to_value == 1.6
        assert results[1].precision == 1

    def test_first_error_aborts(self, converter):
        """One invalid request fails the whole batch."""
        with pytest.raises(InvalidUnitError):
            converter.batch_convert([
                ConversionRequest(value=1, from_unit="km", to_unit="m"),
                ConversionRequest(value=1, from_unit="bogus", to_unit="m"),
            ])

    def test_empty_batch(self, converter):
        """An empty batch gives an empty list."""
        assert converter.batch_convert([]) == []


class TestValidation:
    """Test unit validation and suggestions."""

    def test_valid_unit(self, converter):
        """Known units carry no errors or suggestions."""
        result = converter.validate_unit("km")
        assert result.is_valid is True
        assert result.errors is None
        assert result.suggestions is None

    def test_valid_temperature_unit(self, converter):
        """Temperature symbols are valid units."""
        assert converter.validate_unit("K").is_valid is True

    def test_invalid_unit_without_close_match(self, converter):
        """No unit is similar enough to a long misspelling."""
        result = converter.validate_unit("kilometerz")
        assert result.is_valid is False
        assert result.errors == ["Unknown unit: kilometerz"]
        assert result.suggestions is None

    def test_invalid_unit_with_suggestions(self, converter):
        """Close units are suggested in table order."""
        result = converter.validate_unit("kmm")
        assert result.is_valid is False
        assert result.suggestions[:2] == ["km", "mm"]
        assert len(result.suggestions) <= 3
        assert len(result.suggestions) == len(set(result.suggestions))

    def test_validate_conversion_pair(self, converter):
        """Pairs are checked against the source unit's table."""
        assert converter.validate_conversion("km", "m").is_valid is True
        result = converter.validate_conversion("km", "kg")
        assert result.errors == ["Invalid target unit: kg"]

    def test_validate_conversion_temperature(self, converter):
        """Temperature pairs suggest the valid set."""
        result = converter.validate_conversion("c", "x")
        assert result.suggestions == ["C", "F", "K"]

    def test_validate_conversion_unknown_source(self, converter):
        """Unknown source falls back to single-unit validation."""
        result = converter.validate_conversion("xyz", "m")
        assert result.is_valid is False
        assert result.errors == ["Unknown unit: xyz"]


class TestUnitListings:
    """Test unit and category listings."""

    def test_available_units_for_category(self, converter):
        """Units of one category in table order."""
        units = converter.get_available_units("length")
        assert units[:2] == ["m", "km"]

    def test_available_units_category_any_case(self, converter):
        """Category names are case-insensitive."""
        assert converter.get_available_units("LENGTH") == converter.get_available_units(Category.LENGTH)

    def test_available_units_all(self, converter):
        """All units end with the temperature symbols."""
        units = converter.get_available_units()
        assert "m" in units
        assert "kg" in units
        assert units[-3:] == ["c", "f", "k"]

    def test_available_units_unknown_category(self, converter):
        """Unknown categories raise a conversion error."""
        with pytest.raises(ConversionError, match="Unknown category: invalid"):
            converter.get_available_units("invalid")

    def test_common_units_subset_of_available(self, converter):
        """Every common unit is an available unit."""
        available = set(converter.get_available_units())
        for category in converter.get_supported_categories():
            assert set(converter.get_common_units(category)) <= available

    def test_common_units(self, converter):
        """Curated length units."""
        common = converter.get_common_units(Category.LENGTH)
        assert "m" in common
        assert "km" in common

    def test_common_units_any_case(self, converter):
        """Category names are case-insensitive."""
        assert converter.get_common_units("Data") == ["kb", "mb", "gb", "tb"]

    def test_common_units_unknown_category(self, converter):
        """Unknown categories give an empty list."""
        assert converter.get_common_units("invalid") == []

    def test_supported_categories_order(self, converter):
        """Categories follow resolution order."""
        assert converter.get_supported_categories()[0] == Category.LENGTH
        assert converter.get_supported_categories()[-1] == Category.TEMPERATURE
        assert len(converter.get_supported_categories()) == 9


class TestFormatResult:
    """Test result formatting."""

    def test_short(self, converter):
        """Short format uses an equals sign."""
        result = converter.convert(1, "km", "m")
        assert converter.format_result(result) == "1 km = 1000 m"

    def test_long(self, converter):
        """Long format spells out the relation."""
        result = converter.convert(1, "km", "m")
        assert converter.format_result(result, "long") == "1 km is equal to 1000 m"

    def test_small_value_fixed_notation(self, converter):
        """Small results print without an exponent."""
        result = converter.convert(1, "mg", "kg", ConversionOptions(precision=6))
        assert converter.format_result(result) == "1 mg = 0.000001 kg"

    def test_unknown_format(self, converter):
        """Unknown formats are rejected."""
        result = converter.convert(1, "km", "m")
        with pytest.raises(ConversionError, match="Unknown format"):
            converter.format_result(result, "medium")


class TestModuleApi:
    """Test the module-level functions."""

    def test_convert(self):
        """Module-level convert uses the default converter."""
        assert measurement_converter.convert(1, "km", "m").to_value == 1000

    def test_validate_unit(self):
        """Module-level validate_unit."""
        assert measurement_converter.validate_unit("km").is_valid is True

    def test_format_result(self):
        """Module-level format_result."""
        result = measurement_converter.convert(0, "C", "F")
        assert measurement_converter.format_result(result) == "0 C = 32 F"
