import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from gh_host.exceptions import DuplicatePageError, TemplateError
from gh_host.schemas.post import Post, RenderedPage

logger = logging.getLogger(__name__)

POST_TEMPLATE = "post.html"
INDEX_TEMPLATE = "index.html"
TAG_TEMPLATE = "tag.html"

INDEX_PAGE = "index.html"
TAG_PAGE_PREFIX = "tag-"
PAGE_SUFFIX = ".html"


def build_tag_index(posts: Sequence[Post]) -> Dict[str, List[Post]]:
    """Group posts by tag, keeping the order the posts were read in."""
    tag_index: Dict[str, List[Post]] = {}
    for post in posts:
        for tag in dict.fromkeys(post.tags):
            tag_index.setdefault(tag, []).append(post)
    return tag_index


def tag_page_name(tag: str) -> str:
    # Tag names are used verbatim, characters unsafe in file names included.
    return f"{TAG_PAGE_PREFIX}{tag}{PAGE_SUFFIX}"


class PageComposer:
    """Render post, index and tag pages from a collection of posts.

    Every view template is expected to extend ``layout.html``. Pages are
    returned in memory so callers can decide when to write them.
    """

    def __init__(self, templates_dir: Union[str, Path], base_url: str):
        self.base_url = base_url
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render_posts(self, posts: Sequence[Post]) -> List[RenderedPage]:
        return [
            RenderedPage(
                name=f"{post.slug}{PAGE_SUFFIX}",
                html=self._render(POST_TEMPLATE, post=post, **post.model_dump()),
            )
            for post in posts
        ]

    def render_index(self, posts: Sequence[Post]) -> RenderedPage:
        html = self._render(INDEX_TEMPLATE, posts=list(posts), base_url=self.base_url)
        return RenderedPage(name=INDEX_PAGE, html=html)

    def render_tags(self, posts: Sequence[Post]) -> List[RenderedPage]:
        return [
            RenderedPage(
                name=tag_page_name(tag),
                html=self._render(
                    TAG_TEMPLATE,
                    tag=tag,
                    posts=tagged,
                    base_url=self.base_url,
                ),
            )
            for tag, tagged in build_tag_index(posts).items()
        ]

    def compose(self, posts: Sequence[Post]) -> List[RenderedPage]:
        pages = self.render_posts(posts)
        pages.append(self.render_index(posts))
        pages.extend(self.render_tags(posts))

        seen = set()
        for page in pages:
            if page.name in seen:
                logger.error(f"Page name collision: {page.name}")
                raise DuplicatePageError(page.name)
            seen.add(page.name)

        logger.info(f"Composed {len(pages)} pages from {len(posts)} posts")
        return pages

    def _render(self, template_name: str, **context) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except jinja2.TemplateError as e:
            logger.error(f"Failed to render {template_name}: {e}")
            raise TemplateError(template_name, str(e) or type(e).__name__) from e
