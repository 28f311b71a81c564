"""Todo Explorer: todo API, URL-synchronized filters and a Streamlit console."""

__version__ = "1.0.0"
