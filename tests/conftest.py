import pathlib

import pytest

from render_views.config import Settings

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
VIEWS_DIR = REPO_ROOT / "src" / "views"


class FakeHistory:
    """Fixed dates keyed by file name, no git involved."""

    def __init__(self, dates):
        self.dates = dates
        self.calls = []

    def earliest_commit_date(self, path):
        self.calls.append(pathlib.Path(path))
        return self.dates[pathlib.Path(path).name]


@pytest.fixture
def fake_history():
    return FakeHistory


@pytest.fixture
def site(tmp_path):
    markdown_dir = tmp_path / "src" / "markdown"
    markdown_dir.mkdir(parents=True)
    about = tmp_path / "about.txt"
    about.write_text("About this blog.", encoding="utf-8")
    return Settings(
        markdown_dir=markdown_dir,
        posts_dir=tmp_path / "posts",
        views_dir=VIEWS_DIR,
        about_path=about,
        index_path=tmp_path / "index.html",
    )
