"""Tests for brokenlinks.config.Settings."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from brokenlinks.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test without inherited LINKCHECK_* / CI variables or a stray .env file."""
    for name in ("GITHUB_ACTION", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("LINKCHECK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.base_url == "https://docs.astro.build"
        assert settings.build_output_dir == Path("dist")
        assert settings.page_source_dir == Path("src/pages")
        assert settings.annotate_output is False
        assert settings.color is True
        assert settings.sitemap_path == Path("dist") / "sitemap.xml"

    def test_annotations_enabled_inside_github_actions(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTION", "__run")
        assert Settings().annotate_output is True

    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert Settings().color is False


class TestEnvironmentOverrides:
    def test_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("LINKCHECK_BASE_URL", "https://docs.example.com/")
        monkeypatch.setenv("LINKCHECK_BUILD_OUTPUT_DIR", "out")
        monkeypatch.setenv("LINKCHECK_ANNOTATE_OUTPUT", "true")
        monkeypatch.setenv("LINKCHECK_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.base_url == "https://docs.example.com"
        assert settings.build_output_dir == Path("out")
        assert settings.annotate_output is True
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LINKCHECK_BASE_URL=https://dotenv.example.com\n")
        assert Settings().base_url == "https://dotenv.example.com"


class TestValidation:
    def test_base_url_requires_http_origin(self):
        with pytest.raises(ValidationError):
            Settings(base_url="docs.example.com")

    def test_base_url_rejects_other_schemes(self):
        with pytest.raises(ValidationError):
            Settings(base_url="ftp://docs.example.com")

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestBaseUrlIsOrigin:
    def test_path_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(base_url="https://docs.example.com/docs")

    def test_query_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(base_url="https://docs.example.com?lang=en")

    def test_default_port_and_case_are_normalised(self):
        assert Settings(base_url="HTTPS://Docs.Example.com:443/").base_url == "https://docs.example.com"

    def test_custom_port_is_kept(self):
        assert Settings(base_url="http://localhost:4321").base_url == "http://localhost:4321"
