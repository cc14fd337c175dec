"""Configuration models for the documentation server."""

from template_outlet_mcp.models.config.settings import *

__all__ = ["DocsSettings", "DEFAULT_CONFIG_PATH"]
