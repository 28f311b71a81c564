"""Todo REST API."""
