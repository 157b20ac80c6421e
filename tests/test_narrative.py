# tests/test_narrative.py

from core.models import Meal, WeatherInfo
from services.narrative import build_narrative

MEALS = {
    "breakfast": Meal("breakfast", "Croissant", "Du Pain et des Idées"),
    "lunch": Meal("lunch", "Croque Monsieur", "Café de Flore"),
    "dinner": Meal("dinner", "Coq au Vin", "Le Coq Rico"),
}


def test_fixed_template():
    text = build_narrative("Paris", WeatherInfo("light rain", "indoor"), MEALS)

    assert text == (
        "Welcome to Paris! Today's weather is light rain, perfect for indoor dining.\n"
        "\n"
        "- Breakfast at Du Pain et des Idées, enjoying their famous Croissant.\n"
        "- Lunch at Café de Flore, where you'll try the classic Croque Monsieur.\n"
        "- Dinner at Le Coq Rico, ending your tour with a delicious Coq au Vin."
    )


def test_deterministic():
    weather = WeatherInfo("clear sky", "outdoor")
    assert build_narrative("Paris", weather, MEALS) == build_narrative("Paris", weather, MEALS)


def test_meals_in_order_and_trimmed():
    text = build_narrative("Paris", WeatherInfo("clear sky", "outdoor"), MEALS)

    assert text == text.strip()
    assert text.index("Croissant") < text.index("Croque Monsieur") < text.index("Coq au Vin")
    assert "outdoor dining" in text
