# core/models.py

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

INDOOR = "indoor"
OUTDOOR = "outdoor"

MEAL_TIMES = ("breakfast", "lunch", "dinner")

# Where a looked-up value came from
PROVIDER = "provider"
FALLBACK = "fallback"


@dataclass(frozen=True)
class WeatherInfo:
    condition: str
    dining_type: str

    def to_dict(self) -> dict:
        return {"condition": self.condition, "diningType": self.dining_type}


DEFAULT_WEATHER = WeatherInfo(condition="sunny", dining_type=OUTDOOR)


@dataclass(frozen=True)
class Meal:
    time: str
    dish: str
    restaurant: str

    def to_dict(self) -> dict:
        return {"time": self.time, "dish": self.dish, "restaurant": self.restaurant}


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Result of a call to an upstream provider.
    `source` tells whether `value` came from the provider or is a fallback;
    `reason` says why the fallback was used.
    """
    value: T
    source: str = PROVIDER
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK

    @classmethod
    def fallback(cls, value: T, reason: str) -> "Lookup[T]":
        return cls(value=value, source=FALLBACK, reason=reason)


@dataclass(frozen=True)
class Itinerary:
    city: str
    weather: WeatherInfo
    meals: Tuple[Meal, Meal, Meal]
    narrative: str

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "weather": self.weather.to_dict(),
            "meals": [m.to_dict() for m in self.meals],
            "narrative": self.narrative,
        }
