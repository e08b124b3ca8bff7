import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .ingredients import Ingredient, find_ingredient, list_ingredients
from .presets import DEFAULT_GRAM_AMOUNT, FALLBACK_INGREDIENT
from .utils import format_deciliters, format_grams

logger = logging.getLogger(__name__)

Listener = Callable[["BakingConverter"], None]


class BakingConverter:
    """Selected ingredient plus gram amount, with the deciliter result kept in step.

    Every mutation recomputes ``deciliter_result`` before it returns and then
    notifies subscribers once, so no reader ever sees a stale result.
    """

    def __init__(
        self,
        ingredients: Optional[Iterable[Ingredient]] = None,
        gram_amount: float = DEFAULT_GRAM_AMOUNT,
        locale: Optional[str] = None,
    ):
        self.locale = locale
        self.ingredients: List[Ingredient] = list_ingredients(ingredients, locale)
        if self.ingredients:
            self._selected = self.ingredients[0]
        else:
            self._selected = Ingredient(**FALLBACK_INGREDIENT)
        self._gram_amount = max(0.0, float(gram_amount))
        self._listeners: List[Listener] = []
        self.deciliter_result = 0.0
        self._recalculate()

    @property
    def selected_ingredient(self) -> Ingredient:
        return self._selected

    @property
    def gram_amount(self) -> float:
        return self._gram_amount

    def select_ingredient(self, ingredient: Ingredient) -> None:
        logger.info("Selected ingredient %r (%s g/dl)", ingredient.name, ingredient.grams_per_deciliter)
        self._selected = ingredient
        self._changed()

    def select_ingredient_by_name(self, name: str) -> None:
        self.select_ingredient(find_ingredient(name, self.ingredients))

    def update_gram_amount(self, grams: float) -> None:
        self._gram_amount = max(0.0, float(grams))
        self._changed()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def formatted_gram_amount(self) -> str:
        return format_grams(self._gram_amount)

    def formatted_deciliter_result(self) -> str:
        return format_deciliters(self.deciliter_result)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "ingredient": self._selected.name,
            "gram_amount": self._gram_amount,
            "deciliter_result": self.deciliter_result,
            "grams_text": self.formatted_gram_amount(),
            "result_text": self.formatted_deciliter_result(),
        }

    def _changed(self) -> None:
        self._recalculate()
        logger.debug("Converter state %s", self.snapshot())
        for listener in list(self._listeners):
            listener(self)

    def _recalculate(self) -> None:
        self.deciliter_result = self._selected.convert_grams_to_deciliters(self._gram_amount)
        logger.debug(
            "%s g of %s -> %.4f dl", self._gram_amount, self._selected.name, self.deciliter_result
        )
