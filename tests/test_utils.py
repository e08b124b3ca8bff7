import pytest

from bakecalc.errors import ConversionError
from bakecalc.utils import format_amount_input, format_deciliters, format_grams, format_number, parse_amount


def test_format_number():
    assert format_number(2.5, 2) == "2.50"
    assert format_number(1.0) == "1.0"
    assert format_number("n/a") == "n/a"


def test_format_grams_rounds_to_integer():
    assert format_grams(150) == "150 g"
    assert format_grams(149.6) == "150 g"
    assert format_grams(0) == "0 g"


def test_format_deciliters_two_decimals():
    assert format_deciliters(1.5) == "1.50 dl"
    assert format_deciliters(2) == "2.00 dl"
    assert format_deciliters(100 / 60) == "1.67 dl"


@pytest.mark.parametrize(
    "text, expected",
    [("150", 150.0), ("150 g", 150.0), (" 250G ", 250.0), ("1,5", 1.5), ("12.5 grams", 12.5), (75, 75.0), ("-20", -20.0)],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,5,0", "nan", "inf", None, True])
def test_parse_amount_rejects_garbage(text):
    with pytest.raises(ConversionError) as exc:
        parse_amount(text)
    assert exc.value.code == "invalid_amount"


def test_format_amount_input_keeps_decimals():
    assert format_amount_input(12.5) == "12.5"
    assert format_amount_input(100.0) == "100"
    assert format_amount_input(0) == "0"
    assert parse_amount(format_amount_input(12.5)) == 12.5


def test_parse_amount_error_keeps_rejected_text():
    with pytest.raises(ConversionError) as exc:
        parse_amount("lots", "en")
    assert str(exc.value) == "Invalid amount entered: 'lots'"
    with pytest.raises(ConversionError) as exc:
        parse_amount("mye", "nb")
    assert str(exc.value) == "Ugyldig mengde oppgitt: 'mye'"
