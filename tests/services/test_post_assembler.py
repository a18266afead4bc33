from pathlib import Path

import pytest
from pydantic import ValidationError

from gh_host.schemas.post import PostMetadata
from gh_host.services.post_assembler import assemble_post, derive_slug


def test_derive_slug_strips_content_root_and_extension():
    assert derive_slug("content/posts/hello-world.md", "content/posts") == "hello-world"


def test_derive_slug_accepts_paths():
    assert derive_slug(Path("/site/posts/a.md"), Path("/site/posts")) == "a"


def test_derive_slug_outside_root_uses_file_name():
    assert derive_slug("elsewhere/notes.md", "content/posts") == "notes"


def test_derive_slug_only_strips_trailing_extension():
    assert derive_slug("content/posts/read.md.md", "content/posts") == "read.md"


def test_derive_slug_is_deterministic():
    first = derive_slug("content/posts/same.md", "content/posts")
    second = derive_slug("content/posts/same.md", "content/posts")

    assert first == second


def test_derive_slug_differs_for_different_stems():
    assert derive_slug("content/posts/a.md", "content/posts") != derive_slug(
        "content/posts/b.md", "content/posts"
    )


def test_assemble_post_combines_all_parts():
    metadata = PostMetadata(title="Hello", date="2024-01-01", tags=["x", "y"])

    post = assemble_post(metadata, "<p>hi</p>", "hello", "https://example.com")

    assert post.title == "Hello"
    assert post.date == "2024-01-01"
    assert post.tags == ("x", "y")
    assert post.slug == "hello"
    assert post.content == "<p>hi</p>"
    assert post.base_url == "https://example.com"


def test_assembled_post_is_immutable():
    post = assemble_post(PostMetadata(title="T"), "", "t", "")

    with pytest.raises(ValidationError):
        post.title = "changed"


def test_assembled_post_tags_cannot_be_mutated():
    metadata = PostMetadata(title="T", tags=["x"])
    post = assemble_post(metadata, "", "t", "")

    with pytest.raises(AttributeError):
        post.tags.append("y")

    metadata.tags.append("later")
    assert post.tags == ("x",)
