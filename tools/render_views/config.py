#!/usr/bin/env python3
from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .utils import read_yaml

# ---------- Paths

# This assumes config.py sits in tools/render_views/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
MARKDOWN_DIR = ROOT / "src" / "markdown"
VIEWS_DIR = ROOT / "src" / "views"
ABOUT_PATH = VIEWS_DIR / "components" / "about" / "about.txt"
POSTS_OUT = ROOT / "posts"
INDEX_OUT = ROOT / "index.html"
SETTINGS_FILE = "render-views.yml"

# ---------- Config

POST_TEMPLATE = "post.html.j2"
INDEX_TEMPLATE = "index.html.j2"
DATE_FORMAT = "{month} {day}, {year}"


@dataclass(frozen=True)
class Settings:
    markdown_dir: pathlib.Path = MARKDOWN_DIR
    posts_dir: pathlib.Path = POSTS_OUT
    views_dir: pathlib.Path = VIEWS_DIR
    about_path: pathlib.Path = ABOUT_PATH
    index_path: pathlib.Path = INDEX_OUT
    post_template: str = POST_TEMPLATE
    index_template: str = INDEX_TEMPLATE


_PATH_KEYS = ("markdown_dir", "posts_dir", "views_dir", "about_path", "index_path")
_NAME_KEYS = ("post_template", "index_template")


def load_settings(root: Optional[pathlib.Path] = None) -> Settings:
    """
    Defaults, overridden by `render-views.yml` at the root when present.

    With an explicit root, default paths are re-anchored under it too.
    """
    base = pathlib.Path(root) if root is not None else ROOT
    overrides: Dict[str, Any] = {}
    if root is not None:
        overrides = {
            "markdown_dir": base / "src" / "markdown",
            "posts_dir": base / "posts",
            "views_dir": base / "src" / "views",
            "about_path": base / "src" / "views" / "components" / "about" / "about.txt",
            "index_path": base / "index.html",
        }

    raw = read_yaml(base / SETTINGS_FILE)
    for key in _PATH_KEYS:
        if raw.get(key):
            overrides[key] = (base / str(raw[key])).resolve()
    for key in _NAME_KEYS:
        if raw.get(key):
            overrides[key] = str(raw[key])

    return Settings(**overrides)
