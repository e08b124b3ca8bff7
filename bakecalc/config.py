import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .i18n import available_locales, normalize_locale
from .presets import DEFAULT_GRAM_AMOUNT, DEFAULT_LOCALE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    default_grams: float = DEFAULT_GRAM_AMOUNT
    log_level: str = "WARNING"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``BAKECALC_*`` environment variables."""
    env = os.environ if environ is None else environ

    locale = normalize_locale(env.get("BAKECALC_LOCALE"))
    if locale not in available_locales():
        logger.warning("Unsupported BAKECALC_LOCALE %r, using %r", locale, DEFAULT_LOCALE)
        locale = DEFAULT_LOCALE

    raw_grams = env.get("BAKECALC_DEFAULT_GRAMS")
    default_grams = DEFAULT_GRAM_AMOUNT
    if raw_grams:
        try:
            default_grams = max(0.0, float(raw_grams))
        except ValueError:
            logger.warning("Ignoring non-numeric BAKECALC_DEFAULT_GRAMS=%r", raw_grams)

    log_level = (env.get("BAKECALC_LOG_LEVEL") or "WARNING").upper()
    return Settings(locale=locale, default_grams=default_grams, log_level=log_level)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
