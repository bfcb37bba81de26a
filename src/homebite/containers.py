"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from homebite.adapters.openai_tag_client import OpenAITagClient
from homebite.adapters.supabase_identity_resolver import SupabaseIdentityResolver
from homebite.adapters.supabase_meal_repository import SupabaseMealRepository
from homebite.adapters.supabase_order_repository import SupabaseOrderRepository
from homebite.adapters.supabase_profile_repository import SupabaseProfileRepository
from homebite.adapters.supabase_rating_repository import SupabaseRatingRepository
from homebite.config import Settings
from homebite.services.identity import IdentityService
from homebite.services.meals import MealService
from homebite.services.orders import OrderService
from homebite.services.profiles import ProfileService
from homebite.services.ratings import RatingService
from homebite.services.tagging import TagSuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_service: IdentityService
    meal_service: MealService
    order_service: OrderService
    rating_service: RatingService
    profile_service: ProfileService
    tag_service: TagSuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    order_repository = SupabaseOrderRepository(supabase_client)
    rating_repository = SupabaseRatingRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)

    rating_service = RatingService(
        repository=rating_repository,
        order_repository=order_repository,
    )
    profile_service = ProfileService(profile_repository)
    meal_service = MealService(
        repository=meal_repository,
        rating_service=rating_service,
        profile_service=profile_service,
    )
    order_service = OrderService(order_repository, profile_service=profile_service)
    identity_service = IdentityService(SupabaseIdentityResolver(supabase_client))
    tag_client = OpenAITagClient.create(
        api_key=resolved_settings.ai_gateway_api_key,
        base_url=resolved_settings.ai_gateway_base_url,
        timeout=resolved_settings.ai_timeout_seconds,
    )
    tag_service = TagSuggestionService(
        client=tag_client,
        model=resolved_settings.ai_model,
    )

    async def close_resources() -> None:
        await tag_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_service=identity_service,
        meal_service=meal_service,
        order_service=order_service,
        rating_service=rating_service,
        profile_service=profile_service,
        tag_service=tag_service,
        close_resources=close_resources,
    )
