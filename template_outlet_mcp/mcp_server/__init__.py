"""MCP server for the Alpine.js Template Outlet documentation.

Exposes documentation search, section listing, example retrieval and
installation/version information as Model Context Protocol tools over stdio.
"""
