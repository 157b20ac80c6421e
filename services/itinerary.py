# services/itinerary.py
# ------------------------------------------------------------------------------
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from core.config import Settings
from core.errors import UpstreamError, ValidationError
from core.models import MEAL_TIMES, Itinerary, Meal
from services import restaurants as rsvc, weather as wsvc
from services.dishes import DishCatalog, JsonDishCatalog, select_dishes
from services.narrative import build_narrative

logger = logging.getLogger(__name__)


def _check_city(city) -> str:
    # passed through verbatim; trimming is up to the caller
    if not city or not isinstance(city, str):
        raise ValidationError("City is required")
    return city


class ItineraryPlanner:
    """
    Builds a one-day foodie tour: weather, three dishes, one restaurant per
    dish and a short narrative.
    """

    def __init__(self, settings: Optional[Settings] = None, catalog: Optional[DishCatalog] = None):
        self.settings = settings or Settings.from_env()
        self.catalog = catalog if catalog is not None else JsonDishCatalog(self.settings.dishes_path)

    def build(self, city) -> Itinerary:
        return self._build_checked(_check_city(city))

    def _build_checked(self, city: str) -> Itinerary:
        try:
            return self._build(city)
        except Exception as e:
            logger.exception("Error generating itinerary for %s", city)
            raise UpstreamError("Failed to generate itinerary") from e

    def _build(self, city: str) -> Itinerary:
        s = self.settings
        dishes = select_dishes(city, self.catalog)

        # weather and the three restaurant lookups don't depend on each other
        with ThreadPoolExecutor(max_workers=4) as pool:
            weather_future = pool.submit(
                wsvc.get_weather, city, s.openweather_api_key,
                base_url=s.weather_url, timeout=s.http_timeout,
            )
            restaurant_futures = [
                pool.submit(
                    rsvc.find_restaurant, city, dish, s.yelp_api_key,
                    base_url=s.yelp_url, timeout=s.http_timeout,
                )
                for dish in dishes
            ]
            weather = weather_future.result()
            restaurants = [f.result() for f in restaurant_futures]

        if weather.is_fallback:
            logger.info("Using default weather for %s (%s)", city, weather.reason)

        meals = tuple(
            Meal(time=time, dish=dish, restaurant=found.value)
            for time, dish, found in zip(MEAL_TIMES, dishes, restaurants)
        )
        narrative = build_narrative(city, weather.value, dict(zip(MEAL_TIMES, meals)))

        return Itinerary(city=city, weather=weather.value, meals=meals, narrative=narrative)


def build_itinerary(city,
                    settings: Optional[Settings] = None,
                    catalog: Optional[DishCatalog] = None) -> Itinerary:
    """Validate `city` and plan its tour. Raises ValidationError / UpstreamError."""
    city = _check_city(city)
    return ItineraryPlanner(settings, catalog)._build_checked(city)
