"""Template Outlet documentation server.

Exposes the Alpine.js Template Outlet README and manual through a small set
of MCP tools: full-text search, section listing, example retrieval and
version/installation info.
"""

__version__ = "2.0.2"
