"""Core documentation indexing and search."""
