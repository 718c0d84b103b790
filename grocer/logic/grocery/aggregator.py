"""Grocery aggregation: recipe scaling and ingredient merging.

Quantities are rounded to two decimals half-away-from-zero on their decimal
representation (Decimal + ROUND_HALF_UP), never on the binary float, so
1.005 rounds to 1.01.
"""
from decimal import Decimal, ROUND_HALF_UP
from fractions import Fraction
from typing import Dict, Iterable, List, Tuple, Union

from grocer.domain.Ingredient import IngredientLine
from grocer.utilities.constants import QUANTITY_PRECISION

Factor = Union[int, float, Fraction, Decimal]

_STEP = Decimal(QUANTITY_PRECISION)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    # str() keeps the shortest repr, e.g. 0.1 -> Decimal('0.1') not 0.1000000000000000055...
    return Decimal(str(value))


def round_quantity(value) -> float:
    """Round to 2 decimals (half away from zero) and return a plain number."""
    rounded = _to_decimal(value).quantize(_STEP, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


def _scaled(quantity, factor: Factor) -> Decimal:
    if isinstance(factor, Fraction):
        return _to_decimal(quantity) * factor.numerator / factor.denominator
    return _to_decimal(quantity) * _to_decimal(factor)


def scale(lines: Iterable[IngredientLine], factor: Factor) -> List[IngredientLine]:
    """Multiply every line's quantity by factor, rounding each to 2 decimals."""
    return [line.with_quantity(round_quantity(_scaled(line.quantity, factor))) for line in lines]


def aggregate(lines: Iterable[IngredientLine]) -> List[IngredientLine]:
    """Merge lines sharing (ingredient, unit), summing then re-rounding quantities.

    Output keeps the order in which each key first appeared.
    """
    totals: Dict[Tuple[str, str], Decimal] = {}
    firsts: Dict[Tuple[str, str], IngredientLine] = {}
    for line in lines:
        k = line.key
        if k not in totals:
            totals[k] = Decimal(0)
            firsts[k] = line
        totals[k] += _to_decimal(line.quantity)
    return [firsts[k].with_quantity(round_quantity(total)) for k, total in totals.items()]


def serving_factor(target_servings: Union[int, float], base_servings: int) -> Fraction:
    """Exact ratio of requested servings to a recipe's base yield (2.9 servings -> 29/10)."""
    return Fraction(str(target_servings)) / Fraction(str(base_servings))


__all__ = ['round_quantity', 'scale', 'aggregate', 'serving_factor']
