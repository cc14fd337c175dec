"""Unit tests for settings and MCP server configuration."""

from pathlib import Path

import pydantic
import pytest

from template_outlet_mcp import __version__
from template_outlet_mcp.mcp_server.config import Config
from template_outlet_mcp.models.config import DocsSettings


class TestDocsSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TEMPLATE_OUTLET_DOCS_PATH", raising=False)
        settings = DocsSettings()
        assert settings.server_name == "template-outlet-docs"
        assert settings.log_level == "INFO"
        assert not settings.is_development

    def test_docs_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TEMPLATE_OUTLET_DOCS_PATH", str(tmp_path))
        assert DocsSettings().docs_path == tmp_path

    def test_log_level_normalized(self):
        assert DocsSettings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(pydantic.ValidationError):
            DocsSettings(log_level="chatty")

    def test_load_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("docs_path: /srv/docs\nenvironment: development\n")

        settings = DocsSettings.load_from_file(config_file)
        assert settings.docs_path == Path("/srv/docs")
        assert settings.is_development

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = DocsSettings.load_from_file(tmp_path / "missing.yaml")
        assert settings.environment == "production"

    def test_invalid_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("log_level: chatty\n")
        assert DocsSettings.load_from_file(config_file).log_level == "INFO"


class TestConfig:
    """Test MCP server configuration."""

    def test_from_settings(self):
        config = Config(settings=DocsSettings(server_name="docs"))
        assert config.mcp_server_name == "docs"
        assert config.mcp_server_version == __version__

    def test_overrides(self):
        config = Config(settings=DocsSettings(), mcp_server_name="other")
        assert config.mcp_server_name == "other"
        assert repr(config) == "Config(mcp_server_name='other')"
