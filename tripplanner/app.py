import os

import streamlit as st

from tripplanner.aggregator import build_aggregator, search_sync
from tripplanner.config import load_settings
from tripplanner.errors import TripPlannerError
from tripplanner.models import Intent, SearchResultBundle

# -------------------- CONFIG / KEYS --------------------

# On Streamlit Cloud these come from st.secrets
# Locally you can use .env or export env vars
SETTING_NAMES = (
    "OPENWEATHER_API_KEY",
    "UNSPLASH_ACCESS_KEY",
    "UNSPLASH_API_KEY",
    "WEATHER_UNITS",
    "HTTP_TIMEOUT",
    "PHOTOS_PER_PAGE",
    "WIKIPEDIA_LANG",
    "TRIPPLANNER_USER_AGENT",
)

SEARCH_SUGGESTIONS = [
    "Paris", "Tokyo", "London", "Rome", "Barcelona", "New York",
    "Sydney", "Dubai", "Amsterdam", "Prague", "Bangkok", "Istanbul",
    "San Francisco", "Vancouver", "Copenhagen", "Vienna", "Edinburgh",
]


def _secret(name: str):
    try:
        return st.secrets.get(name, os.getenv(name))
    except FileNotFoundError:  # no secrets.toml outside Streamlit Cloud
        return os.getenv(name)


def load_keys() -> dict:
    values = {}
    for name in SETTING_NAMES:
        value = _secret(name)
        if value is not None:
            values[name] = str(value)
    return values


@st.cache_resource
def get_aggregator():
    return build_aggregator(load_settings(load_keys()))


# -------------------- UTILS: SESSION STATE --------------------

def init_state():
    if "current_destination" not in st.session_state:
        st.session_state["current_destination"] = ""
    if "bundle" not in st.session_state:
        st.session_state["bundle"] = None
    if "error" not in st.session_state:
        st.session_state["error"] = None


def run_search(destination: str, intent: Intent):
    """Search and store the outcome; the spinner covers the whole request."""
    destination = (destination or "").strip()
    if not destination:
        st.session_state["bundle"] = None
        st.session_state["error"] = "Please enter a destination to search for."
        return

    st.session_state["current_destination"] = destination
    with st.spinner(f"Searching {destination}..."):
        try:
            bundle = search_sync(destination, intent, aggregator=get_aggregator())
        except TripPlannerError as exc:
            st.session_state["bundle"] = None
            st.session_state["error"] = exc.message
            return
    st.session_state["bundle"] = bundle
    st.session_state["error"] = None


# -------------------- RENDERING --------------------

def render_summary(bundle: SearchResultBundle):
    st.header(bundle.destination)
    summary = bundle.summary
    if summary.extract:
        st.subheader(summary.title)
        st.write(summary.extract)


def render_weather(bundle: SearchResultBundle):
    weather = bundle.weather
    if weather is None:
        st.info("No live weather data available.")
        return

    st.subheader("Current weather")
    icon_col, temp_col = st.columns([1, 4])
    with icon_col:
        st.image(weather.icon_url, width=80)
    with temp_col:
        st.metric("Temperature", f"{round(weather.temperature_c)}°C")
        st.caption(weather.condition_text)

    humidity, wind, visibility = st.columns(3)
    humidity.metric("Humidity", f"{weather.humidity_pct:g}%")
    wind.metric("Wind", f"{weather.wind_speed_ms:g} m/s")
    visibility.metric("Visibility", f"{weather.visibility_km:.1f} km")


def render_gallery(bundle: SearchResultBundle):
    st.subheader("Photos")
    if not bundle.photos:
        st.write("No photos available for this destination.")
        return

    columns = st.columns(3)
    for i, photo in enumerate(bundle.photos):
        with columns[i % 3]:
            st.image(photo.image_url, caption=photo.display_label)
            if photo.link_url:
                st.markdown(f"[View on Unsplash]({photo.link_url})")


# -------------------- STREAMLIT UI --------------------

def main():
    st.set_page_config(page_title="TripPlanner")
    st.title("TripPlanner")
    st.caption("Current weather, photos and a short history for any destination.")

    init_state()

    # Sidebar
    st.sidebar.header("Search settings")
    intent_label = st.sidebar.radio(
        "Photos",
        options=["City life", "Tourist attractions"],
        index=0,
    )
    intent = Intent.ATTRACTIONS if intent_label == "Tourist attractions" else Intent.GENERAL

    suggestion = st.sidebar.selectbox("Popular destinations", [""] + SEARCH_SUGGESTIONS)

    with st.form("search"):
        destination = st.text_input("Destination", value=suggestion, placeholder="e.g. Jaipur")
        submitted = st.form_submit_button("Search")

    if submitted:
        run_search(destination, intent)

    error = st.session_state["error"]
    if error:
        st.error(error)
        if st.session_state["current_destination"] and st.button("Retry"):
            run_search(st.session_state["current_destination"], intent)
            st.rerun()
        return

    bundle = st.session_state["bundle"]
    if bundle is None:
        st.write("Enter a destination to see its weather, photos and history.")
        return

    render_summary(bundle)
    render_weather(bundle)
    render_gallery(bundle)


if __name__ == "__main__":
    main()
