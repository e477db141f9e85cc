"""Run configuration loaded from environment variables."""

import os
from functools import lru_cache
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brokenlinks.services.normalizer import origin


class Settings(BaseSettings):
    """Link checker settings.

    Every field can be overridden with a ``LINKCHECK_``-prefixed environment
    variable (``LINKCHECK_BASE_URL``, ``LINKCHECK_BUILD_OUTPUT_DIR`` …) or a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKCHECK_",
        env_file=".env",
        extra="ignore",
    )

    # Origin used to recognise internal links, e.g. https://docs.example.com
    base_url: str = "https://docs.astro.build"
    build_output_dir: Path = Path("./dist")
    page_source_dir: Path = Path("./src/pages")

    # Forward broken links to the CI annotation sink (on by default inside GitHub Actions)
    annotate_output: bool = Field(default_factory=lambda: "GITHUB_ACTION" in os.environ)

    sitemap_name: str = "sitemap.xml"
    content_file_name: str = "index.html"
    color: bool = Field(default_factory=lambda: "NO_COLOR" not in os.environ)
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        parsed = urlsplit(value)
        if (
            parsed.scheme.lower() not in ("http", "https")
            or not parsed.hostname
            or parsed.path
            or parsed.query
            or parsed.fragment
        ):
            raise ValueError("base_url must be an http(s) origin such as https://docs.example.com")
        # Same spelling as origins computed for links (lowercase, no default port)
        return origin(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {value!r}")
        return value

    @property
    def sitemap_path(self) -> Path:
        return self.build_output_dir / self.sitemap_name


@lru_cache
def get_settings() -> Settings:
    return Settings()
