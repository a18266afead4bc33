from pathlib import PurePath
from typing import Union

from gh_host.schemas.post import Post, PostMetadata

POST_EXTENSION = ".md"


def derive_slug(path: Union[str, PurePath], content_dir: Union[str, PurePath]) -> str:
    """Slug of a post file: its path relative to the content root, minus ``.md``."""
    path = PurePath(path)
    try:
        relative = path.relative_to(content_dir)
    except ValueError:
        relative = PurePath(path.name)
    return relative.as_posix().removesuffix(POST_EXTENSION)


def assemble_post(
    metadata: PostMetadata, content: str, slug: str, base_url: str
) -> Post:
    return Post(
        title=metadata.title,
        date=metadata.date,
        tags=tuple(metadata.tags),
        slug=slug,
        content=content,
        base_url=base_url,
    )
