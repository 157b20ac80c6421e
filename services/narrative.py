# services/narrative.py

import textwrap
from typing import Mapping

from core.models import Meal, WeatherInfo

_NARRATIVE_TEMPLATE = textwrap.dedent(
    """\
    Welcome to {city}! Today's weather is {condition}, perfect for {dining_type} dining.

    - Breakfast at {breakfast.restaurant}, enjoying their famous {breakfast.dish}.
    - Lunch at {lunch.restaurant}, where you'll try the classic {lunch.dish}.
    - Dinner at {dinner.restaurant}, ending your tour with a delicious {dinner.dish}.
    """
)


def build_narrative(city: str, weather: WeatherInfo, meals: Mapping[str, Meal]) -> str:
    """Return the day's story; `meals` is keyed by breakfast / lunch / dinner."""
    return _NARRATIVE_TEMPLATE.format(
        city=city,
        condition=weather.condition,
        dining_type=weather.dining_type,
        breakfast=meals["breakfast"],
        lunch=meals["lunch"],
        dinner=meals["dinner"],
    ).strip()
