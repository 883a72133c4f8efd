from __future__ import annotations

import pathlib
from typing import List

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

from .posts import Post


def make_env(views_dir: pathlib.Path) -> Environment:
    """
    Jinja environment over the views directory.

    Undefined fields raise instead of rendering empty, so a template that
    asks for something a Post lacks fails the build.
    """
    return Environment(
        loader=FileSystemLoader(str(views_dir)),
        undefined=StrictUndefined,
        autoescape=select_autoescape(["html", "html.j2"]),
    )


def render_post_html(post: Post, env: Environment, template: str) -> Post:
    html = env.get_template(template).render(**post.context())
    return post.with_(html=html)


def read_about(path: pathlib.Path) -> str:
    return pathlib.Path(path).read_text(encoding="utf-8")


def render_index(
    posts: List[Post],
    about_text: str,
    env: Environment,
    template: str,
) -> str:
    return env.get_template(template).render(posts=posts, about_text=about_text)
