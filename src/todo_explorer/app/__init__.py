"""Streamlit console for browsing todos."""
