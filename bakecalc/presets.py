# Defaults aligned with the slider and quick buttons of the converter UI
DEFAULT_GRAM_AMOUNT = 100.0
MIN_GRAM_AMOUNT = 1.0
MAX_GRAM_AMOUNT = 1000.0
GRAM_STEP = 1.0

QUICK_AMOUNTS = (50, 100, 200, 250, 500)

DEFAULT_LOCALE = "nb"
SUPPORTED_LOCALES = ("nb", "en")

# Used when a converter is built from an empty ingredient list
FALLBACK_INGREDIENT = {
    "name": "Unknown",
    "grams_per_deciliter": 60,
}
