def grams_to_deciliters(grams: float, grams_per_deciliter: float) -> float:
    # Unknown density (0 or below) converts to nothing instead of dividing by zero
    if grams_per_deciliter <= 0:
        return 0.0
    return float(grams) / float(grams_per_deciliter)


def deciliters_to_grams(deciliters: float, grams_per_deciliter: float) -> float:
    return float(deciliters) * float(grams_per_deciliter)
