"""Preference-based meal recommendations."""

import logging
from collections.abc import Sequence
from decimal import Decimal

from homebite.domain.errors import InvalidInputError
from homebite.domain.recommendations import (
    CandidateMeal,
    DietaryPreferences,
    Recommendation,
)
from homebite.domain.tags import allergen_tag, free_tags

DEFAULT_LIMIT = 5
LOW_STOCK_THRESHOLD = 3

ALLERGY_FREE_POINTS = 20
WITHIN_BUDGET_POINTS = 15
CLOSE_TO_BUDGET_POINTS = 5
LOW_STOCK_POINTS = 10
CLOSE_TO_BUDGET_FACTOR = Decimal("1.1")
LOW_STOCK_REASON = "Low stock - order soon!"

# restriction -> (points, reason)
_RESTRICTION_MATCHES: dict[str, tuple[int, str]] = {
    "Vegetarian": (30, "Vegetarian"),
    "Vegan": (30, "Vegan"),
    "Halal": (30, "Halal-friendly"),
    "Gluten-Free": (25, "Gluten-Free"),
}

_logger = logging.getLogger(__name__)


def recommend(
    meals: Sequence[CandidateMeal] | None,
    preferences: DietaryPreferences,
    limit: int = DEFAULT_LIMIT,
) -> list[Recommendation]:
    """Rank meals against dietary preferences, best match first."""
    if meals is None:
        raise InvalidInputError("Meals array is required")

    scored: list[Recommendation] = []
    for meal in meals:
        recommendation = _score_meal(meal, preferences)
        if recommendation is not None:
            scored.append(recommendation)

    # sorted() is stable, ties keep feed order
    ranked = sorted(scored, key=lambda item: -item.score)
    _logger.debug(
        "Scored %s meals, %s qualified, returning %s",
        len(meals),
        len(ranked),
        min(len(ranked), limit),
    )
    return ranked[:limit]


def _score_meal(
    meal: CandidateMeal, preferences: DietaryPreferences
) -> Recommendation | None:
    if meal.remaining_portions <= 0:
        return None

    tags = set(meal.tags)
    score = 0
    reasons: list[str] = []

    for allergy in preferences.allergies:
        if allergen_tag(allergy) in tags:
            return None
        matched = next((tag for tag in free_tags(allergy) if tag in tags), None)
        if matched is not None:
            score += ALLERGY_FREE_POINTS
            reasons.append(matched)

    for restriction in preferences.restrictions:
        match = _RESTRICTION_MATCHES.get(restriction)
        if match is not None and restriction in tags:
            points, reason = match
            score += points
            reasons.append(reason)

    budget = preferences.max_budget
    if budget:
        label = format_amount(budget)
        if meal.price <= budget:
            score += WITHIN_BUDGET_POINTS
            reasons.append(f"Within your €{label} budget")
        elif meal.price <= budget * CLOSE_TO_BUDGET_FACTOR:
            score += CLOSE_TO_BUDGET_POINTS
            reasons.append(f"Close to your €{label} budget")

    if meal.remaining_portions <= LOW_STOCK_THRESHOLD:
        score += LOW_STOCK_POINTS
        reasons.append(LOW_STOCK_REASON)

    if score <= 0 or not reasons:
        return None
    return Recommendation(meal=meal, reason=compose_reason(reasons), score=score)


def compose_reason(reasons: list[str]) -> str:
    """Collapse matched reasons into one short sentence."""
    if len(reasons) == 1:
        return reasons[0]
    budget_reason = next((reason for reason in reasons if "budget" in reason), None)
    if budget_reason is not None:
        others = [
            reason
            for reason in reasons
            if "budget" not in reason and "stock" not in reason
        ]
        if others:
            return f"{others[0]} & {budget_reason}"
        return budget_reason
    return " & ".join(reasons[:2])


def format_amount(amount: Decimal) -> str:
    """Render an amount without trailing zeros, e.g. 12 or 12.5."""
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")
