"""Command-line interface for the Template Outlet documentation server."""

from template_outlet_mcp import __version__

__all__ = ["__version__"]
