import math
import re

from .errors import ConversionError

_UNIT_SUFFIX = re.compile(r"\s*(g|gram|grams)\s*$", re.IGNORECASE)


def format_number(x, digits=1):
    try:
        return f"{float(x):.{digits}f}"
    except Exception:
        return str(x)


def format_grams(grams: float) -> str:
    return f"{format_number(grams, 0)} g"


def format_deciliters(deciliters: float) -> str:
    return f"{format_number(deciliters, 2)} dl"


def format_amount_input(grams: float) -> str:
    """Amount as typed into a text field: no unit, no trailing zeros."""
    return f"{float(grams):.6f}".rstrip("0").rstrip(".")


def parse_amount(text, locale=None) -> float:
    """Read a gram amount typed by a user, e.g. ``"150"``, ``"150 g"`` or ``"1,5"``.

    Sign is preserved; clamping is left to the converter.
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        cleaned = _UNIT_SUFFIX.sub("", str(text or "").strip()).replace(",", ".")
        try:
            value = float(cleaned)
        except ValueError:
            raise ConversionError("invalid_amount", repr(text), locale) from None
    if not math.isfinite(value):
        raise ConversionError("invalid_amount", repr(text), locale)
    return value
