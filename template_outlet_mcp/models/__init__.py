"""Models for the documentation server."""
