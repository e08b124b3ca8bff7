"""Display strings for the converter, keyed the same way for every locale.

Ingredient names are stored untranslated (Norwegian) and looked up under
``ingredient.<slug>``; anything missing from a table falls back to the
caller's default.
"""
import unicodedata
from typing import Dict, Optional

from .presets import DEFAULT_LOCALE, SUPPORTED_LOCALES


def ingredient_key(name: str) -> str:
    return "ingredient." + name.lower().replace(" ", "_")


def normalize_locale(locale: Optional[str]) -> str:
    """Reduce ``en_US`` / ``nb-NO`` style tags to the language part."""
    if not locale:
        return DEFAULT_LOCALE
    return locale.replace("-", "_").split("_")[0].lower()


_EN_INGREDIENTS = {
    "Hvetemel": "Wheat flour",
    "Grovt mel": "Wholemeal flour",
    "Havregryn": "Rolled oats",
    "Maizena": "Cornstarch",
    "Potetmel": "Potato starch",
    "Salt": "Salt",
    "Sukker": "Sugar",
    "Melis": "Icing sugar",
    "Sirup": "Syrup",
    "Rosiner": "Raisins",
    "Margarin": "Margarine",
    "Olje": "Oil",
    "Smulegryn": "Breadcrumbs",
    "Ris, langkornet": "Rice, long grain",
    "Ris rundkornet": "Rice, round grain",
    "Erter, Bønner, Linser": "Peas, beans, lentils",
    "Kakao": "Cocoa",
    "Kokosmasse": "Desiccated coconut",
    "Syltetøy": "Jam",
    "Hvit-ost revet": "Grated white cheese",
}

_TABLES: Dict[str, Dict[str, str]] = {
    "nb": {
        "app.title": "Bakeutenvekt",
        "app.subtitle": "Gjør om gram til desiliter for baking",
        "section.ingredient": "Velg ingrediens",
        "section.amount": "Mengde i gram",
        "section.quick": "Hurtigvalg",
        "section.result": "Resultat",
        "input.amount": "Skriv inn gram",
        "sidebar.language": "Språk",
        "error.invalid_ingredient": "Ugyldig ingrediens valgt",
        "error.invalid_amount": "Ugyldig mengde oppgitt",
    },
    "en": {
        "app.title": "Bake without scales",
        "app.subtitle": "Convert grams to deciliters for baking",
        "section.ingredient": "Select Ingredient",
        "section.amount": "Amount in Grams",
        "section.quick": "Quick amounts",
        "section.result": "Result",
        "input.amount": "Type grams",
        "sidebar.language": "Language",
        "error.invalid_ingredient": "Invalid ingredient selected",
        "error.invalid_amount": "Invalid amount entered",
        **{ingredient_key(name): text for name, text in _EN_INGREDIENTS.items()},
    },
}


def available_locales():
    return SUPPORTED_LOCALES


def translate(key: str, default: str, locale: Optional[str] = None) -> str:
    table = _TABLES.get(normalize_locale(locale), {})
    return table.get(key, default)


# Norwegian puts æ, ø, å (and the Swedish ä, ö) after z, in that order
_ALPHABETS = {
    "nb": str.maketrans({"æ": "{", "ä": "{", "ø": "|", "ö": "|", "å": "}"}),
}


def collation_key(text: str, locale: Optional[str] = None) -> str:
    """Sort key that orders ``text`` the way a reader of ``locale`` expects."""
    alphabet = _ALPHABETS.get(normalize_locale(locale), {})
    folded = unicodedata.normalize("NFC", text).casefold().translate(alphabet)
    return "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
