"""Shared fixtures: a small on-disk UI bundle and a specification file."""

import json

import pytest

from plumage.assets import AssetBundle

SPEC = {"openapi": "3.0.3", "info": {"title": "Pets", "version": "1.0.0"}, "paths": {}}


@pytest.fixture
def ui_dir(tmp_path):
    """A UI tree with one distinguishable index per theme and a shared stylesheet."""
    ui = tmp_path / "ui"
    for theme in ("default", "minimal", "modern"):
        (ui / theme / "js").mkdir(parents=True)
        (ui / theme / "index.html").write_text(f"<h1>{theme}</h1>")
        (ui / theme / "js" / "app.js").write_text(f"console.log('{theme}');")
    (ui / "modern" / "guide").mkdir()
    (ui / "modern" / "guide" / "index.html").write_text("<h1>modern guide</h1>")
    (ui / "assets" / "fonts").mkdir(parents=True)
    (ui / "assets" / "style.css").write_text("body { color: red; }")
    (ui / "assets" / "fonts" / "inter.woff2").write_bytes(b"wOF2\x00\x01")
    return ui


@pytest.fixture
def bundle(ui_dir) -> AssetBundle:
    return AssetBundle.from_directory(ui_dir)


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "docs" / "swagger.json"
    path.parent.mkdir()
    path.write_text(json.dumps(SPEC))
    return path
