"""Tests for meal posting and the feed."""

from uuid import uuid4

import pytest

from homebite.domain.errors import InvalidInputError, NotFoundError
from homebite.domain.orders import OrderStatus
from homebite.domain.profiles import ANONYMOUS_COOK_NAME, CookProfile
from homebite.services.meals import MealService
from homebite.services.orders import OrderService
from homebite.services.profiles import ProfileService
from homebite.services.ratings import RatingService
from tests.conftest import (
    InMemoryMealRepository,
    InMemoryOrderRepository,
    InMemoryProfileRepository,
    InMemoryRatingRepository,
    make_draft,
)


def _setup() -> tuple[MealService, OrderService, RatingService]:
    meals = InMemoryMealRepository()
    orders = InMemoryOrderRepository(meals)
    ratings = RatingService(InMemoryRatingRepository(), orders)
    return MealService(meals, ratings), OrderService(orders), ratings


def test_post_meal_starts_with_all_portions() -> None:
    service, _, _ = _setup()
    cook_id = uuid4()

    meal = service.post_meal(cook_id, make_draft(portions=6, tags=("Vegan",)))

    assert meal.cook_id == cook_id
    assert meal.total_portions == 6
    assert meal.remaining_portions == 6
    assert meal.tags == ("Vegan",)
    assert service.get_meal(meal.id) == meal


@pytest.mark.parametrize(
    "draft",
    [
        make_draft(dish_name="   "),
        make_draft(price="-1"),
        make_draft(portions=0),
    ],
)
def test_post_meal_rejects_invalid_drafts(draft) -> None:
    service, _, _ = _setup()

    with pytest.raises(InvalidInputError):
        service.post_meal(uuid4(), draft)


def test_get_unknown_meal() -> None:
    service, _, _ = _setup()

    with pytest.raises(NotFoundError):
        service.get_meal(uuid4())


def test_list_meals_newest_first_and_by_cook() -> None:
    service, _, _ = _setup()
    cook_id = uuid4()
    first = service.post_meal(cook_id, make_draft(dish_name="Couscous"))
    second = service.post_meal(uuid4(), make_draft(dish_name="Pho"))
    third = service.post_meal(cook_id, make_draft(dish_name="Tajine"))

    assert [meal.id for meal in service.list_meals()] == [third.id, second.id, first.id]
    assert [meal.id for meal in service.list_meals(cook_id=cook_id)] == [
        third.id,
        first.id,
    ]


def test_feed_attaches_cook_rating() -> None:
    service, orders, ratings = _setup()
    rated_cook, new_cook = uuid4(), uuid4()
    rated_meal = service.post_meal(rated_cook, make_draft(dish_name="Quiche"))
    service.post_meal(new_cook, make_draft(dish_name="Cassoulet"))
    eater_id = uuid4()
    order_id = orders.place_order(eater_id, rated_meal.id)
    for status in (OrderStatus.PACKING, OrderStatus.READY, OrderStatus.PICKED_UP):
        orders.advance_status(order_id, status)
    ratings.submit_rating(order_id, rated_cook, eater_id, 4)

    feed = {listing.meal.cook_id: listing for listing in service.list_feed()}

    assert feed[rated_cook].cook_rating == 4.0
    assert feed[rated_cook].cook_rating_count == 1
    assert feed[rated_cook].meal.remaining_portions == 2
    assert feed[new_cook].cook_rating is None
    assert feed[new_cook].cook_rating_count == 0


def test_feed_attaches_cook_profile_with_anonymous_fallback() -> None:
    meals = InMemoryMealRepository()
    ratings = RatingService(InMemoryRatingRepository(), InMemoryOrderRepository(meals))
    profiles = InMemoryProfileRepository()
    service = MealService(meals, ratings, ProfileService(profiles))
    named_cook, unnamed_cook, blank_cook = uuid4(), uuid4(), uuid4()
    profiles.profiles[named_cook] = CookProfile(
        user_id=named_cook,
        display_name="Amélie",
        avatar_url="https://example.com/amelie.png",
        neighborhood="Le Marais",
        nationality="French",
    )
    profiles.profiles[blank_cook] = CookProfile(user_id=blank_cook, display_name="")
    service.post_meal(named_cook, make_draft(dish_name="Quiche"))
    service.post_meal(named_cook, make_draft(dish_name="Coq au Vin"))
    service.post_meal(unnamed_cook, make_draft(dish_name="Pho"))
    service.post_meal(blank_cook, make_draft(dish_name="Tajine"))

    feed = {listing.meal.dish_name: listing for listing in service.list_feed()}

    assert feed["Quiche"].cook_name == "Amélie"
    assert feed["Quiche"].cook_avatar == "https://example.com/amelie.png"
    assert feed["Quiche"].neighborhood == "Le Marais"
    assert feed["Quiche"].nationality == "French"
    assert feed["Coq au Vin"].cook_name == "Amélie"
    assert feed["Pho"].cook_name == ANONYMOUS_COOK_NAME
    assert feed["Pho"].nationality is None
    assert feed["Tajine"].cook_name == ANONYMOUS_COOK_NAME
    # one batched lookup with each cook once
    assert len(profiles.lookups) == 1
    assert sorted(profiles.lookups[0]) == sorted([named_cook, unnamed_cook, blank_cook])
