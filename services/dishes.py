# services/dishes.py

import json
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

FALLBACK_DISHES = (
    "Local Breakfast Special",
    "Traditional Lunch Cuisine",
    "Regional Dinner Delicacy",
)


class DishCatalog(Protocol):
    def dishes_for(self, city: str) -> Optional[List[str]]:
        ...


class InMemoryDishCatalog:
    """Catalog backed by a plain mapping, city -> ordered dishes."""

    def __init__(self, data: Optional[Mapping[str, Sequence[str]]] = None):
        self._data = {city: list(dishes) for city, dishes in (data or {}).items()}

    def dishes_for(self, city: str) -> Optional[List[str]]:
        dishes = self._data.get(city)
        return list(dishes) if dishes is not None else None


class JsonDishCatalog:
    """
    Catalog read from a JSON object on disk, e.g. {"Paris": ["Croissant", …]}.
    The file is re-read on every lookup; a missing or malformed file behaves
    like an empty catalog.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> dict:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not load %s, using fallback dishes: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("%s is not a JSON object, using fallback dishes", self.path)
            return {}
        return data

    def dishes_for(self, city: str) -> Optional[List[str]]:
        dishes = self.load().get(city)
        if not isinstance(dishes, list):
            return None
        return [str(d) for d in dishes]


def load_catalog(path: Union[str, Path]) -> JsonDishCatalog:
    return JsonDishCatalog(path)


def select_dishes(city: str, catalog: DishCatalog) -> Tuple[str, str, str]:
    """Breakfast, lunch and dinner dishes for `city` (exact match only)."""
    dishes = catalog.dishes_for(city)
    if not dishes or len(dishes) < 3:
        return FALLBACK_DISHES
    return dishes[0], dishes[1], dishes[2]
