from __future__ import annotations

import dataclasses
import pathlib
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import ParseError
from .utils import write_text

_TITLE_MARKER = re.compile(r"^#+[ \t]*")


@dataclass(frozen=True)
class Post:
    """
    One markdown source and what gets derived from it.

    Stages never mutate a Post; each one returns a copy via `with_`.
    """

    name: str
    path: str
    timestamp: Optional[int] = None
    human_readable_date: Optional[str] = None
    title: Optional[str] = None
    markdown: Optional[str] = None
    content: Optional[str] = None
    html: Optional[str] = None

    def with_(self, **changes: Any) -> "Post":
        return dataclasses.replace(self, **changes)

    def context(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def list_posts(directory: pathlib.Path) -> List[Post]:
    """Every entry of `directory`, unfiltered and not recursive."""
    directory = pathlib.Path(directory).resolve()
    return [
        Post(name=entry.name, path=str(entry))
        for entry in sorted(directory.iterdir(), key=lambda p: p.name)
    ]


def split_front_matter(text: str) -> Tuple[str, str]:
    """
    headers := everything before the first "#" (anywhere, not line-anchored)
    markdown := the rest, starting at that "#"
    """
    start = text.find("#")
    if start < 0:
        raise ParseError("no '#' heading found")
    return text[:start], text[start:]


def extract_title(markdown: str) -> str:
    first_line = markdown.split("\n", 1)[0]
    title = _TITLE_MARKER.sub("", first_line).rstrip()
    if not title:
        raise ParseError(f"empty title in heading line {first_line!r}")
    return title


def read_post(post: Post) -> Post:
    text = pathlib.Path(post.path).read_text(encoding="utf-8")
    try:
        _, markdown = split_front_matter(text)
        title = extract_title(markdown)
    except ParseError as exc:
        raise ParseError(f"{post.path}: {exc}") from exc
    return post.with_(title=title, markdown=markdown)


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    # newest first
    return sorted(posts, key=lambda p: p.timestamp, reverse=True)


def write_post(post: Post, directory: pathlib.Path) -> pathlib.Path:
    out = pathlib.Path(directory) / f"{post.name}.html"
    write_text(out, post.html)
    print(f"✓ wrote {out}")
    return out


def write_index(html: str, path: pathlib.Path) -> None:
    write_text(path, html)
    print(f"✓ wrote {path}")
