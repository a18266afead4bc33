import logging
from pathlib import Path
from typing import List, Union

from gh_host.schemas.post import Post
from gh_host.services.content_parser import decode_metadata, split_frontmatter
from gh_host.services.markdown_renderer import BodyRenderer, render_markdown
from gh_host.services.post_assembler import (
    POST_EXTENSION,
    assemble_post,
    derive_slug,
)

logger = logging.getLogger(__name__)


def read_posts(
    content_dir: Union[str, Path],
    base_url: str,
    renderer: BodyRenderer = render_markdown,
) -> List[Post]:
    """Read every ``.md`` file directly inside ``content_dir`` into a Post.

    Subdirectories are not descended into. Files are read in name order so
    repeated runs see the same sequence. The first unreadable or undecodable
    file aborts the whole read.
    """
    content_dir = Path(content_dir)
    entries = sorted(content_dir.iterdir(), key=lambda p: p.name)

    posts = []
    for path in entries:
        if not path.is_file() or not path.name.endswith(POST_EXTENSION):
            continue
        try:
            posts.append(read_post(path, content_dir, base_url, renderer))
        except Exception as e:
            logger.error(f"Failed to read post {path}: {e}")
            raise

    logger.info(f"Read {len(posts)} posts from {content_dir}")
    return posts


def read_post(
    path: Path,
    content_dir: Union[str, Path],
    base_url: str,
    renderer: BodyRenderer = render_markdown,
) -> Post:
    raw = path.read_text(encoding="utf-8")
    metadata_text, body = split_frontmatter(raw)
    metadata = decode_metadata(metadata_text, source=str(path))
    return assemble_post(
        metadata,
        renderer(body),
        derive_slug(path, content_dir),
        base_url,
    )
