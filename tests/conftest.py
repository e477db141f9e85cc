"""Shared fixtures: a throwaway build output and source tree under tmp_path."""

from typing import Iterable

import pytest

from brokenlinks.config import Settings

BASE_URL = "https://docs.example.com"


def sitemap_xml(locs: Iterable[str], namespace: bool = True) -> str:
    ns = ' xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"' if namespace else ""
    entries = "".join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset{ns}>{entries}</urlset>'


def html_page(body: str) -> str:
    return f"<!DOCTYPE html><html><head><title>Page</title></head><body>{body}</body></html>"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        base_url=BASE_URL,
        build_output_dir=tmp_path / "dist",
        page_source_dir=tmp_path / "src" / "pages",
        annotate_output=False,
        color=False,
    )


@pytest.fixture
def write_sitemap(settings):
    def _write(*pathnames: str, namespace: bool = True) -> None:
        settings.build_output_dir.mkdir(parents=True, exist_ok=True)
        locs = [BASE_URL + p if p.startswith("/") else p for p in pathnames]
        settings.sitemap_path.write_text(sitemap_xml(locs, namespace), encoding="utf-8")

    return _write


@pytest.fixture
def write_page(settings):
    def _write(pathname: str, body: str = "") -> None:
        target = settings.build_output_dir / pathname.strip("/") / "index.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html_page(body), encoding="utf-8")

    return _write


@pytest.fixture
def write_source(settings):
    def _write(relative: str) -> None:
        target = settings.page_source_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("# Source\n", encoding="utf-8")

    return _write
