from typing import Optional

from .i18n import translate

_DEFAULT_MESSAGES = {
    "invalid_ingredient": "Invalid ingredient selected",
    "invalid_amount": "Invalid amount entered",
}


class ConversionError(ValueError):
    """Raised by the lookup and parsing helpers; the conversion itself never fails."""

    def __init__(self, code: str, detail: Optional[str] = None, locale: Optional[str] = None):
        self.code = code
        self.detail = detail
        message = translate(f"error.{code}", _DEFAULT_MESSAGES.get(code, code), locale)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
