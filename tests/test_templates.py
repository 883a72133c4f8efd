import pathlib

import pytest
from jinja2 import TemplateError

from render_views.posts import Post
from render_views.templates import make_env, read_about, render_index, render_post_html

VIEWS_DIR = pathlib.Path(__file__).resolve().parents[1] / "src" / "views"


def _post(**kw):
    fields = dict(
        name="hello.md",
        path="/src/hello.md",
        timestamp=1579089600000,
        human_readable_date="Jan 15, 2020",
        title="Hello <World>",
        markdown="# Hello\n",
        content="<h1>Hello</h1>\n<p><em>hi</em></p>",
    )
    fields.update(kw)
    return Post(**fields)


def test_post_template_renders_fields():
    env = make_env(VIEWS_DIR)
    post = render_post_html(_post(), env, "post.html.j2")

    assert "<p><em>hi</em></p>" in post.html
    assert "Jan 15, 2020" in post.html
    # plain fields are escaped, rendered content is not
    assert "<title>Hello &lt;World&gt;</title>" in post.html


def test_missing_field_is_a_template_error(tmp_path):
    (tmp_path / "post.html.j2").write_text("{{ subtitle }}", encoding="utf-8")
    env = make_env(tmp_path)
    with pytest.raises(TemplateError):
        render_post_html(_post(), env, "post.html.j2")


def test_missing_template_is_a_template_error(tmp_path):
    with pytest.raises(TemplateError):
        render_post_html(_post(), make_env(tmp_path), "post.html.j2")


def test_index_lists_posts_in_given_order():
    env = make_env(VIEWS_DIR)
    posts = [
        _post(name="new.md", title="Newer"),
        _post(name="old.md", title="Older"),
    ]
    html = render_index(posts, "Hi there & welcome", env, "index.html.j2")

    assert html.index('href="posts/new.md.html"') < html.index('href="posts/old.md.html"')
    assert "Hi there &amp; welcome" in html


def test_index_without_posts():
    html = render_index([], "about", make_env(VIEWS_DIR), "index.html.j2")
    assert "<li>" not in html
    assert "about" in html


def test_read_about(tmp_path):
    about = tmp_path / "about.txt"
    about.write_text("me", encoding="utf-8")
    assert read_about(about) == "me"
    with pytest.raises(OSError):
        read_about(tmp_path / "missing.txt")
