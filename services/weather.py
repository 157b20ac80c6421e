# services/weather.py

import logging
from typing import Optional

import requests

from core.config import WEATHER_URL
from core.models import DEFAULT_WEATHER, INDOOR, OUTDOOR, Lookup, WeatherInfo

logger = logging.getLogger(__name__)

INDOOR_CONDITIONS = frozenset({"rain", "snow", "storm", "thunderstorm"})


def dining_type_for(condition_code: str) -> str:
    """Map OpenWeather's short condition code ("Rain", "Clear"…) to a dining style."""
    return INDOOR if condition_code.lower() in INDOOR_CONDITIONS else OUTDOOR


def get_weather(city: str,
                api_key: Optional[str],
                *,
                base_url: str = WEATHER_URL,
                timeout: float = 10.0) -> Lookup[WeatherInfo]:
    """
    Current weather for `city` from OpenWeather.
    Never raises: any failure yields DEFAULT_WEATHER as a fallback.
    """
    if not api_key:
        logger.error("OPENWEATHERMAP_API_KEY is not set, using default weather")
        return Lookup.fallback(DEFAULT_WEATHER, "missing api key")

    params = {
        "q": city,
        "appid": api_key,
    }
    logger.info("Fetching weather for %s", city)
    try:
        r = requests.get(base_url, params=params, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        logger.error("Error fetching weather for %s: %s", city, e)
        return Lookup.fallback(DEFAULT_WEATHER, str(e))
    except ValueError as e:
        logger.error("Weather response for %s is not JSON: %s", city, e)
        return Lookup.fallback(DEFAULT_WEATHER, "invalid json")

    slots = data.get("weather") if isinstance(data, dict) else None
    if not isinstance(slots, list) or not slots or not isinstance(slots[0], dict):
        logger.warning("Weather data not available for city: %s", city)
        return Lookup.fallback(DEFAULT_WEATHER, "no weather data")

    first = slots[0]
    code = first.get("main")
    description = first.get("description")
    if not isinstance(code, str) or not isinstance(description, str):
        logger.warning("Incomplete weather data for city: %s", city)
        return Lookup.fallback(DEFAULT_WEATHER, "no weather data")

    # description is kept verbatim, e.g. "light rain", "clear sky"
    return Lookup(WeatherInfo(condition=description, dining_type=dining_type_for(code)))
