"""Tests for localekit.i18n.numbers module."""

import pytest

from localekit.i18n.numbers import to_currency, to_human_size, to_number, to_percentage


@pytest.mark.unit
class TestToNumber:
    """Tests for to_number()."""

    def test_grouping_and_precision(self, empty_translator):
        result = to_number(empty_translator.context, 1234.5, {"precision": 2, "delimiter": ",", "separator": "."})
        assert result == "1,234.50"

    def test_defaults(self, empty_translator):
        """Default precision is 3 with , and . separators."""
        assert to_number(empty_translator.context, 1234567.8) == "1,234,567.800"

    def test_negative(self, empty_translator):
        assert to_number(empty_translator.context, -1234.5, {"precision": 1}) == "-1,234.5"

    def test_precision_zero(self, empty_translator):
        assert to_number(empty_translator.context, 1234.5, {"precision": 0}) == "1,235"

    def test_rounds_half_up(self, empty_translator):
        assert to_number(empty_translator.context, 2.675, {"precision": 2}) == "2.68"

    def test_strip_insignificant_zeros(self, empty_translator):
        options = {"precision": 4, "strip_insignificant_zeros": True}
        assert to_number(empty_translator.context, 1.5, options) == "1.5"

    def test_strip_all_fraction_digits_drops_separator(self, empty_translator):
        options = {"precision": 2, "strip_insignificant_zeros": True}
        assert to_number(empty_translator.context, 10, options) == "10"

    def test_custom_separators(self, empty_translator):
        options = {"precision": 2, "delimiter": ".", "separator": ","}
        assert to_number(empty_translator.context, 1234567.891, options) == "1.234.567,89"

    def test_small_numbers_not_grouped(self, empty_translator):
        assert to_number(empty_translator.context, 12, {"precision": 0}) == "12"

    def test_format_with_unit(self, empty_translator):
        options = {"precision": 1, "unit": "km", "format": "%n %u"}
        assert to_number(empty_translator.context, -5, options) == "-5.0 km"

    def test_locale_number_format(self, translator):
        """The locale's number.format fills options not given by the caller."""
        assert to_number(translator.context, 1234.5678) == "1,234.57"

    def test_caller_options_beat_locale_format(self, translator):
        assert to_number(translator.context, 1234.5678, {"precision": 1}) == "1,234.6"

    def test_non_number_raises(self, empty_translator):
        with pytest.raises(TypeError):
            to_number(empty_translator.context, "12")

    def test_infinity(self, empty_translator):
        """Non-finite values are placed into the format as words."""
        ctx = empty_translator.context
        assert to_number(ctx, float("inf")) == "Infinity"
        assert to_number(ctx, float("-inf")) == "-Infinity"
        assert to_number(ctx, float("nan")) == "NaN"

    def test_infinity_in_unit_formats(self, empty_translator):
        ctx = empty_translator.context
        assert to_currency(ctx, float("-inf")) == "-$Infinity"
        assert to_percentage(ctx, float("inf")) == "Infinity%"
        assert to_human_size(ctx, float("inf")) == "InfinityTB"


@pytest.mark.unit
class TestToCurrency:
    """Tests for to_currency()."""

    def test_negative_sign_first(self, empty_translator):
        options = {"unit": "$", "precision": 2, "format": "%u%n", "sign_first": True}
        assert to_currency(empty_translator.context, -20, options) == "-$20.00"

    def test_sign_inside(self, empty_translator):
        """Without sign_first the sign sits next to the number."""
        options = {"unit": "$", "precision": 2, "format": "%u%n", "sign_first": False}
        assert to_currency(empty_translator.context, -20, options) == "$-20.00"

    def test_defaults(self, empty_translator):
        assert to_currency(empty_translator.context, 100.99) == "$100.99"
        assert to_currency(empty_translator.context, 1000) == "$1,000.00"

    def test_locale_currency_format(self, translator):
        translator.locale = "pt-BR"
        assert to_currency(translator.context, 1234.5) == "R$ 1.234,50"

    def test_unit_option(self, empty_translator):
        assert to_currency(empty_translator.context, 12, {"unit": "€", "format": "%n %u"}) == "12.00 €"


@pytest.mark.unit
class TestToPercentage:
    """Tests for to_percentage()."""

    def test_defaults(self, empty_translator):
        assert to_percentage(empty_translator.context, 1234) == "1234.000%"

    def test_precision(self, empty_translator):
        assert to_percentage(empty_translator.context, 12.5, {"precision": 0}) == "13%"

    def test_locale_format(self, translator):
        assert to_percentage(translator.context, 12.34) == "12.3%"


@pytest.mark.unit
class TestToHumanSize:
    """Tests for to_human_size()."""

    def test_bytes_default_labels(self, empty_translator):
        assert to_human_size(empty_translator.context, 1) == "1Byte"
        assert to_human_size(empty_translator.context, 100) == "100Bytes"

    def test_kilobytes(self, empty_translator):
        assert to_human_size(empty_translator.context, 1024) == "1KB"
        assert to_human_size(empty_translator.context, 1536) == "1.5KB"

    def test_larger_units(self, empty_translator):
        assert to_human_size(empty_translator.context, 1024 ** 2) == "1MB"
        assert to_human_size(empty_translator.context, 1024 ** 3 * 2) == "2GB"
        assert to_human_size(empty_translator.context, 1024 ** 4) == "1TB"

    def test_stops_at_terabytes(self, empty_translator):
        assert to_human_size(empty_translator.context, 1024 ** 5) == "1024TB"

    def test_translated_labels(self, translator):
        translator.store_translations(
            "en",
            {
                "number": {
                    "human": {
                        "storage_units": {
                            "units": {"byte": {"one": " byte", "other": " bytes"}, "kb": " kB"},
                        },
                    },
                },
            },
        )
        assert to_human_size(translator.context, 2) == "2 bytes"
        assert to_human_size(translator.context, 2048) == "2 kB"

    def test_options_override(self, empty_translator):
        assert to_human_size(empty_translator.context, 1536, {"format": "%n %u", "precision": 2}) == "1.50 KB"
