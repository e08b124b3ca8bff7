from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .calculations import deciliters_to_grams, grams_to_deciliters
from .errors import ConversionError
from .i18n import collation_key, ingredient_key, translate


@dataclass(frozen=True)
class Ingredient:
    """A baking ingredient and its density in grams per deciliter.

    Identity is the name: two entries with the same name compare and hash
    equal whatever their density.
    """

    name: str
    grams_per_deciliter: float = field(compare=False)

    @property
    def id(self) -> str:
        return self.name

    def localized_name(self, locale: Optional[str] = None) -> str:
        return translate(ingredient_key(self.name), self.name, locale)

    def convert_grams_to_deciliters(self, grams: float) -> float:
        return grams_to_deciliters(grams, self.grams_per_deciliter)

    def convert_deciliters_to_grams(self, deciliters: float) -> float:
        return deciliters_to_grams(deciliters, self.grams_per_deciliter)


DEFAULT_INGREDIENTS = (
    Ingredient("Hvetemel", 60),
    Ingredient("Grovt mel", 55),
    Ingredient("Havregryn", 40),
    Ingredient("Maizena", 50),
    Ingredient("Potetmel", 70),
    Ingredient("Salt", 230),
    Ingredient("Sukker", 90),
    Ingredient("Melis", 60),
    Ingredient("Sirup", 120),
    Ingredient("Rosiner", 60),
    Ingredient("Margarin", 90),
    Ingredient("Olje", 90),
    Ingredient("Smulegryn", 70),
    Ingredient("Ris, langkornet", 80),
    Ingredient("Ris rundkornet", 90),
    Ingredient("Erter, Bønner, Linser", 80),
    Ingredient("Kakao", 40),
    Ingredient("Kokosmasse", 40),
    Ingredient("Syltetøy", 125),
    Ingredient("Hvit-ost revet", 40),
)


def display_sort_key(ingredient: Ingredient, locale: Optional[str] = None) -> str:
    return collation_key(ingredient.localized_name(locale), locale)


def list_ingredients(
    ingredients: Optional[Iterable[Ingredient]] = None,
    locale: Optional[str] = None,
) -> List[Ingredient]:
    """Ingredients ordered by their display name in ``locale``."""
    if ingredients is None:
        ingredients = DEFAULT_INGREDIENTS
    return sorted(ingredients, key=lambda i: display_sort_key(i, locale))


def find_ingredient(name: str, ingredients: Optional[Iterable[Ingredient]] = None) -> Ingredient:
    if ingredients is None:
        ingredients = DEFAULT_INGREDIENTS
    for ingredient in ingredients:
        if ingredient.name == name:
            return ingredient
    raise ConversionError("invalid_ingredient", repr(name))
