from __future__ import annotations

from fractions import Fraction

import pytest

from cookbridge.core.errors import InvalidInput
from cookbridge.models.grocery import CategoryTag
from cookbridge.services.grocery_estimates import categorize, estimate_cost, estimate_quantity


def test_known_ingredient_base_quantity():
    q = estimate_quantity("eggs")

    assert (q.amount, q.unit, q.notes) == (6, "pieces", "Large eggs")


def test_quantity_lookup_ignores_case_and_padding():
    assert estimate_quantity("  Olive Oil ").amount == 250


def test_unknown_ingredient_gets_default_quantity():
    q = estimate_quantity("saffron")

    assert (q.amount, q.unit, q.notes) == (1, "item", "Check recipe for specific amount")


@pytest.mark.parametrize(
    "name, multiplier, expected",
    [
        ("eggs", 2, 12),
        ("cheese", Fraction(1, 3), 67),
        ("butter", Fraction(3, 4), 75),
        ("tomato", 0.25, 1),
        ("olive oil", Fraction(1, 4), 63),
        ("saffron", Fraction(5, 2), 3),
    ],
)
def test_scaled_quantity_rounds_up(name: str, multiplier, expected: int):
    assert estimate_quantity(name, multiplier).amount == expected


def test_exact_multiples_do_not_overshoot():
    # 6 * 8/4 must stay 12, not round 12.000000001 up to 13
    assert estimate_quantity("eggs", Fraction(8, 4)).amount == 12
    assert estimate_quantity("cheese", Fraction(7, 7)).amount == 200


def test_unit_and_notes_are_never_scaled():
    q = estimate_quantity("garlic", 3)

    assert q.unit == "head"
    assert q.notes == "Fresh bulb"


def test_non_positive_multiplier_rejected():
    with pytest.raises(InvalidInput):
        estimate_quantity("eggs", 0)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Tomato", CategoryTag.produce),
        ("cherry tomato", CategoryTag.produce),
        ("herb", CategoryTag.produce),
        ("mozzarella", CategoryTag.dairy),
        ("peanut butter", CategoryTag.dairy),
        ("chicken breast", CategoryTag.protein),
        ("egg", CategoryTag.protein),
        ("rice", CategoryTag.pantry),
        ("oil", CategoryTag.pantry),
        ("black pepper", CategoryTag.pantry),
        ("bell pepper", CategoryTag.produce),
        ("bread", CategoryTag.bread),
        ("soy sauce", CategoryTag.condiments),
        ("quinoa", CategoryTag.other),
        ("", CategoryTag.other),
        ("   ", CategoryTag.other),
    ],
)
def test_categorize(name: str, expected: CategoryTag):
    assert categorize(name) is expected


def test_categorize_first_matching_category_wins():
    # "garlic" (produce) beats "bread" (bread) because produce is checked first
    assert categorize("garlic bread") is CategoryTag.produce


def test_estimate_cost_empty_is_zero():
    assert estimate_cost([]) == 0


def test_estimate_cost_unknown_item_uses_default_price():
    assert estimate_cost(["unknown-item"]) == 2.50


def test_estimate_cost_sums_known_prices_case_insensitively():
    assert estimate_cost(["Eggs", "cheese", "OLIVE OIL"]) == 14.50


def test_estimate_cost_is_rounded_to_cents():
    cost = estimate_cost(["a", "b", "c", "pepper", "onion"])

    assert cost == 12.00
    assert round(cost, 2) == cost
