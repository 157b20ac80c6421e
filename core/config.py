# core/config.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
YELP_URL = "https://api.yelp.com/v3/businesses/search"
DISHES_PATH = Path(__file__).resolve().parent.parent / "services" / "data" / "dishes.json"


def _env(name: str) -> Optional[str]:
    # blank values in .env count as unset
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    openweather_api_key: Optional[str] = None
    yelp_api_key: Optional[str] = None
    weather_url: str = WEATHER_URL
    yelp_url: str = YELP_URL
    dishes_path: Path = DISHES_PATH
    http_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read credentials and paths from the process environment (.env included).
        Both API keys are optional: components degrade to fallbacks without them.
        """
        load_dotenv()
        dishes_path = _env("DISHES_PATH")
        timeout = _env("HTTP_TIMEOUT")
        return cls(
            openweather_api_key=_env("OPENWEATHERMAP_API_KEY"),
            yelp_api_key=_env("YELP_API_KEY"),
            dishes_path=Path(dishes_path) if dishes_path else DISHES_PATH,
            http_timeout=float(timeout) if timeout else 10.0,
        )
