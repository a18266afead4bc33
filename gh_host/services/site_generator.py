import logging
from pathlib import Path
from typing import List, Optional

from gh_host.schemas.post import RenderedPage
from gh_host.services.collection_reader import read_posts
from gh_host.services.markdown_renderer import BodyRenderer, render_markdown
from gh_host.services.page_composer import PageComposer
from gh_host.settings import Settings, settings

logger = logging.getLogger(__name__)


def generate_site(
    current_settings: Optional[Settings] = None,
    renderer: BodyRenderer = render_markdown,
) -> List[Path]:
    """Read every post and write the post, index and tag pages.

    All pages are rendered before the first one is written, so a template
    failure leaves the output directory untouched.
    """
    current_settings = current_settings or settings
    content_dir = Path(current_settings.CONTENT_DIR)
    output_dir = Path(current_settings.OUTPUT_DIR)

    output_dir.mkdir(parents=True, exist_ok=True)
    content_dir.mkdir(parents=True, exist_ok=True)

    posts = read_posts(content_dir, current_settings.BASE_URL, renderer)
    composer = PageComposer(current_settings.TEMPLATES_DIR, current_settings.BASE_URL)
    pages = composer.compose(posts)

    written = write_pages(pages, output_dir)
    logger.info(f"Site generated: {len(written)} pages written to {output_dir}")
    return written


def write_pages(pages: List[RenderedPage], output_dir: Path) -> List[Path]:
    written = []
    for page in pages:
        path = output_dir / page.name
        path.write_text(page.html, encoding="utf-8")
        written.append(path)
    return written
