from __future__ import annotations

import mistune

from .posts import Post

# Raw HTML passes through untouched, single newlines stay soft,
# and bare URLs become links.
_md = mistune.create_markdown(escape=False, hard_wrap=False, plugins=["url"])


def markdown_to_html(md: str) -> str:
    return _md(md)


def render_markdown(post: Post) -> Post:
    return post.with_(content=markdown_to_html(post.markdown))
