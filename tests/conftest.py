import textwrap
from pathlib import Path

import httpx
import pytest

from gh_host.settings import Settings

# --- Template helpers ---

LAYOUT = """<html><body>{% block content %}{% endblock %}</body></html>
"""

POST_VIEW = """{% extends "layout.html" %}{% block content %}<h1>{{ title }}</h1>\
<p>{{ date }}</p><p>{{ tags | join(",") }}</p>{{ content | safe }}{% endblock %}"""

INDEX_VIEW = """{% extends "layout.html" %}{% block content %}\
{% for post in posts %}<a href="{{ base_url }}/{{ post.slug }}.html">{{ post.title }}</a>\
{% endfor %}{% endblock %}"""

TAG_VIEW = """{% extends "layout.html" %}{% block content %}<h1>{{ tag }}</h1>\
{% for post in posts %}<a href="{{ base_url }}/{{ post.slug }}.html">{{ post.title }}</a>\
{% endfor %}{% endblock %}"""


def write_templates(directory: Path, **overrides) -> Path:
    templates = {
        "layout.html": LAYOUT,
        "post.html": POST_VIEW,
        "index.html": INDEX_VIEW,
        "tag.html": TAG_VIEW,
    }
    templates.update(overrides)
    directory.mkdir(parents=True, exist_ok=True)
    for name, body in templates.items():
        if body is not None:
            (directory / name).write_text(body, encoding="utf-8")
    return directory


def write_post(directory: Path, name: str, raw: str) -> Path:
    """Write a post file, dedenting the raw text the way the tests write it."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


class FakeRenderer:
    """
    Markdown renderer stand-in recording every body it was given.
    """

    def __init__(self):
        self.calls = []

    def __call__(self, body: str) -> str:
        self.calls.append(body)
        return f"<rendered>{body}</rendered>"


class FakeGitHub:
    """
    Minimal GitHub API stand-in served through httpx.MockTransport.
    """

    def __init__(self, status_code: int = 204, body: str = ""):
        self.status_code = status_code
        self.body = body
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def site(tmp_path):
    """Settings pointing at a throwaway content/templates/output tree."""
    templates_dir = write_templates(tmp_path / "templates")
    return Settings(
        BASE_URL="https://example.com",
        CONTENT_DIR=str(tmp_path / "content" / "posts"),
        OUTPUT_DIR=str(tmp_path / "output"),
        TEMPLATES_DIR=str(templates_dir),
    )
