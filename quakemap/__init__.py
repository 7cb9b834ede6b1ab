"""Folium map composition and Streamlit page for the quake feeds."""
