# services/restaurants.py

import logging
from typing import Optional

import requests

from core.config import YELP_URL
from core.models import Lookup

logger = logging.getLogger(__name__)


def placeholder_name(dish: str, city: Optional[str] = None) -> str:
    if city is None:
        return f"Local {dish} Restaurant"
    return f"Local {dish} Restaurant in {city}"


def find_restaurant(city: str,
                    dish: str,
                    api_key: Optional[str],
                    *,
                    base_url: str = YELP_URL,
                    timeout: float = 10.0) -> Lookup[str]:
    """
    Top-rated business serving `dish` in `city`, from Yelp Fusion.

    Never raises. Transport errors, HTTP errors or a missing key give
    "Local {dish} Restaurant in {city}"; an empty result set gives
    "Local {dish} Restaurant".
    """
    if not api_key:
        logger.warning("YELP_API_KEY is not set, using placeholder restaurant")
        return Lookup.fallback(placeholder_name(dish, city), "missing api key")

    params = {
        "location": city,
        "term": dish,
        "sort_by": "rating",
        "limit": 1,
    }
    headers = {"Authorization": f"Bearer {api_key}"}
    try:
        r = requests.get(base_url, params=params, headers=headers, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        logger.error("Error fetching restaurant for %r in %s: %s", dish, city, e)
        return Lookup.fallback(placeholder_name(dish, city), str(e))
    except ValueError as e:
        logger.error("Yelp response for %r in %s is not JSON: %s", dish, city, e)
        return Lookup.fallback(placeholder_name(dish, city), "invalid json")

    businesses = data.get("businesses") if isinstance(data, dict) else None
    name = None
    if isinstance(businesses, list) and businesses and isinstance(businesses[0], dict):
        name = businesses[0].get("name")
    if isinstance(name, str) and name:
        return Lookup(name)

    logger.info("No restaurant found for %r in %s", dish, city)
    return Lookup.fallback(placeholder_name(dish), "no results")
