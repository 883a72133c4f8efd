#!/usr/bin/env python3
"""
Static blog renderer.

- src/markdown/<name> -> posts/<name>.html through src/views/post.html.j2
- index.html through src/views/index.html.j2, newest post first

Per post: list -> git first-commit date -> split front matter ->
markdown -> template. Then sort, write posts, render and write the index.
Any failure aborts the whole run.
"""

from __future__ import annotations

from typing import List, Optional

from .config import Settings, load_settings
from .git import GitHistory, HistoryProvider, resolve_timestamp
from .markdown_processing import render_markdown
from .posts import (
    Post,
    list_posts,
    read_post,
    sort_posts,
    write_index,
    write_post,
)
from .templates import make_env, read_about, render_index, render_post_html


def build_posts(settings: Settings, history: HistoryProvider) -> List[Post]:
    env = make_env(settings.views_dir)
    rendered: List[Post] = []
    for post in list_posts(settings.markdown_dir):
        post = resolve_timestamp(post, history)
        post = read_post(post)
        post = render_markdown(post)
        post = render_post_html(post, env, settings.post_template)
        rendered.append(post)
    return sort_posts(rendered)


def run(
    settings: Optional[Settings] = None,
    history: Optional[HistoryProvider] = None,
) -> List[Post]:
    settings = settings or load_settings()
    history = history or GitHistory()

    posts = build_posts(settings, history)
    if not posts:
        print(f"- no posts in {settings.markdown_dir}")

    settings.posts_dir.mkdir(parents=True, exist_ok=True)
    for post in posts:
        write_post(post, settings.posts_dir)

    env = make_env(settings.views_dir)
    about_text = read_about(settings.about_path)
    index_html = render_index(posts, about_text, env, settings.index_template)
    write_index(index_html, settings.index_path)
    print(f"✓ rendered {len(posts)} posts")
    return posts


def main():
    run(load_settings(), GitHistory())


if __name__ == "__main__":
    main()
