"""Main Streamlit application for the quake & plate boundary map."""

import asyncio
import logging

import streamlit as st
from streamlit_folium import st_folium

from quakefeed.config import settings
from quakefeed.errors import ConfigError, FetchError
from quakefeed.logging_utils import configure_logging
from quakemap.components.map_view import load_quake_map
from quakemap.config.theme import MapConfig

LOGGER = logging.getLogger("quakemap")


def main() -> None:
    """Main application entry point."""
    # Page configuration - must be the first Streamlit command
    st.set_page_config(page_title="Earthquakes & Tectonic Plates", layout="wide")
    configure_logging()

    st.title("Earthquakes & Tectonic Plates")
    st.caption(
        "Seismic events from the USGS feed, colored by depth and sized by magnitude, "
        "over the PB2002 plate boundaries."
    )

    try:
        with st.spinner("Loading earthquake and plate boundary feeds..."):
            m, layers = asyncio.run(load_quake_map(settings))
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        st.error(f"Configuration error: {exc}")
        st.stop()
    except FetchError as exc:
        LOGGER.error("Feed download failed: %s", exc)
        st.error(f"Could not load map data: {exc}")
        st.info(
            "Please refresh the page. If the problem persists, check your connection and try again."
        )
        st.stop()

    if layers.skipped:
        st.warning(
            f"Skipped {layers.quake_summary.skipped} malformed quake feature(s) and "
            f"{layers.plate_summary.skipped} malformed plate boundary feature(s)."
        )
    st.caption(f"**Quakes:** {len(layers.quakes)} · **Plate boundaries:** {len(layers.plates)}")

    st_folium(m, width=None, height=MapConfig.HEIGHT, returned_objects=[])


if __name__ == "__main__":
    main()
