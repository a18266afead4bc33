import datetime
import logging
from pathlib import Path
from typing import List, Optional, Union

import frontmatter
from frontmatter import YAMLHandler

from gh_host.exceptions import PostExistsError, PostNotFoundError
from gh_host.services.content_parser import DELIMITER, is_delimiter
from gh_host.services.post_assembler import POST_EXTENSION

logger = logging.getLogger(__name__)

_yaml_handler = YAMLHandler()


class PostsService:
    """Create, delete and update the Markdown source files of posts."""

    def __init__(self, content_dir: Union[str, Path]):
        self.content_dir = Path(content_dir)

    def path_for(self, slug: str) -> Path:
        return self.content_dir / f"{slug}{POST_EXTENSION}"

    def create_post(
        self,
        title: str,
        content: str,
        tags: Optional[str] = None,
        date: Optional[str] = None,
    ) -> Path:
        published = _parse_date(date) if date else datetime.date.today()
        path = self.path_for(slugify_title(title))
        if path.exists():
            raise PostExistsError(f"Post already exists: {path}")

        post = frontmatter.Post(
            content, title=title, date=published, tags=parse_tags(tags)
        )
        self.content_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(
            frontmatter.dumps(
                post, sort_keys=False, default_flow_style=None, width=float("inf")
            ),
            encoding="utf-8",
        )
        logger.info(f"Created post: {path}")
        return path

    def delete_post(self, slug: str) -> Path:
        path = self.path_for(slug)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise PostNotFoundError(f"Post not found: {path}") from e
        logger.info(f"Deleted post: {path}")
        return path

    def update_post(
        self,
        slug: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[str] = None,
    ) -> Path:
        """Rewrite the title and tags lines of a post and optionally its body.

        Other metadata lines are kept as they are. A new body replaces
        everything after the closing delimiter.
        """
        path = self.path_for(slug)
        if not path.is_file():
            raise PostNotFoundError(f"Post not found: {path}")

        raw = path.read_text(encoding="utf-8")
        replacements = {}
        if title:
            replacements["title"] = title
        if tags:
            replacements["tags"] = parse_tags(tags)

        updated = _rewrite_post(raw, replacements, content or None)
        path.write_text(updated, encoding="utf-8")
        logger.info(f"Updated post: {path}")
        return path


def slugify_title(title: str) -> str:
    return title.strip().lower().replace(" ", "-")


def parse_tags(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e


def _metadata_line(key: str, value) -> str:
    # one line per key: lists in flow style, scalars plain and never wrapped
    return _yaml_handler.export(
        {key: value},
        default_flow_style=None if isinstance(value, list) else False,
        width=float("inf"),
    )


def _rewrite_post(raw: str, replacements: dict, content: Optional[str]) -> str:
    lines: List[str] = []
    pending = dict(replacements)
    delimiters = 0
    in_replaced_value = False

    for line in raw.split("\n"):
        if delimiters < 2 and is_delimiter(line):
            delimiters += 1
            in_replaced_value = False
            if delimiters == 2:
                # keys the block did not have yet go in before it closes
                lines.extend(_metadata_line(k, v) for k, v in pending.items())
                pending.clear()
                lines.append(line)
                if content is not None:
                    lines.extend(["", content])
                    break
            else:
                lines.append(line)
            continue

        if delimiters == 1:
            if in_replaced_value and line.startswith((" ", "\t", "-")):
                continue
            in_replaced_value = False
            key = line.split(":", 1)[0]
            if ":" in line and key in pending:
                lines.append(_metadata_line(key, pending.pop(key)))
                in_replaced_value = True
                continue

        lines.append(line)

    if delimiters == 1:
        lines.extend(_metadata_line(k, v) for k, v in pending.items())
        lines.append(DELIMITER)
        if content is not None:
            lines.extend(["", content])
    elif delimiters == 0 and content is not None:
        logger.warning("Post has no metadata block, replacing the whole file")
        lines = [content]

    updated = "\n".join(lines)
    if content is not None:
        updated += "\n"
    return updated
