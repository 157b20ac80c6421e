# app.py

import os
from dotenv import load_dotenv

load_dotenv()  # ← FOODIE_TOUR_API_URL may live in .env

import requests
import streamlit as st

API_URL = os.getenv("FOODIE_TOUR_API_URL", "http://localhost:8000/api/foodie-tour")

POPULAR_CITIES = [
    "Tokyo", "Paris", "Mumbai", "New York", "Rome", "London", "Bangkok",
    "Barcelona", "Istanbul", "Dubai", "Singapore", "Sydney", "Mexico City",
    "Buenos Aires", "Cairo", "Seoul", "Berlin", "Amsterdam", "Prague", "Vienna",
]

MEAL_ICONS = {"breakfast": "🌅", "lunch": "☀️", "dinner": "🌙"}


def request_itinerary(city: str) -> dict:
    """POST the city to the planner API; raises RuntimeError on any failure."""
    try:
        r = requests.post(API_URL, json={"city": city}, timeout=60)
    except requests.RequestException as e:
        raise RuntimeError("Failed to generate itinerary") from e
    if not r.ok:
        raise RuntimeError("Failed to generate itinerary")
    return r.json()


# ──────────────────────────────────────────────────────────────────────────────
# 0. Streamlit configuration
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="Foodie Tour Planner", page_icon="🍽️", layout="centered")

# ──────────────────────────────────────────────────────────────────────────────
# 1. session_state initialisation (default values)
# ──────────────────────────────────────────────────────────────────────────────
defaults = {
    "itinerary": None,       # {"city":…, "weather":…, "meals":…, "narrative":…}
    "error_message": "",
    "loading": False,
    "pending_city": "",
}
for k, v in defaults.items():
    st.session_state.setdefault(k, v)


def _on_submit():
    # runs before the rerun, so the button is already disabled while we wait
    typed = st.session_state.get("city_text", "")
    picked = st.session_state.get("city_pick") or ""
    st.session_state.pending_city = (typed or picked).strip()
    st.session_state.loading = bool(st.session_state.pending_city)
    if not st.session_state.loading:
        st.session_state.error_message = "Please select or enter a city name"


# ──────────────────────────────────────────────────────────────────────────────
# 2. Input form
# ──────────────────────────────────────────────────────────────────────────────
st.markdown("# 🍽️ Foodie Tour Planner")
st.caption("Three meals, three restaurants, picked for today's weather.")

with st.form("tour_form"):
    st.selectbox("Popular cities", POPULAR_CITIES, index=None,
                 placeholder="Choose a city…", key="city_pick")
    st.text_input("…or enter any city", key="city_text")
    st.form_submit_button(
        "Plan my foodie tour",
        on_click=_on_submit,
        disabled=st.session_state.loading,
    )

# ──────────────────────────────────────────────────────────────────────────────
# 3. On form submission
# ──────────────────────────────────────────────────────────────────────────────
if st.session_state.loading:
    st.session_state.error_message = ""
    st.session_state.itinerary = None
    with st.spinner(f"Planning your tour of {st.session_state.pending_city}…"):
        try:
            st.session_state.itinerary = request_itinerary(st.session_state.pending_city)
        except (RuntimeError, ValueError) as e:
            st.session_state.error_message = f"⚠️ {e}"
    st.session_state.loading = False
    st.rerun()

# ──────────────────────────────────────────────────────────────────────────────
# 4. Display error message if needed
# ──────────────────────────────────────────────────────────────────────────────
if st.session_state.error_message:
    st.error(st.session_state.error_message)

# ──────────────────────────────────────────────────────────────────────────────
# 5. If an itinerary exists, display it
# ──────────────────────────────────────────────────────────────────────────────
data = st.session_state.itinerary
if data:
    st.subheader(f"📍 {data['city']}")
    weather = data["weather"]
    col1, col2 = st.columns(2)
    col1.metric("Weather", weather["condition"])
    col2.metric("Dining", weather["diningType"].capitalize())

    st.markdown("### Today's meals")
    for meal in data["meals"]:
        with st.container(border=True):
            st.markdown(f"**{MEAL_ICONS.get(meal['time'], '')} {meal['time'].capitalize()}**")
            st.write(f"{meal['dish']} at *{meal['restaurant']}*")

    st.markdown("### Your day")
    st.text(data["narrative"])
