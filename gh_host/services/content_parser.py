import logging
from typing import List, Optional, Tuple

import yaml
from frontmatter import YAMLHandler

from gh_host.exceptions import DecodeError
from gh_host.schemas.post import PostMetadata

logger = logging.getLogger(__name__)

DELIMITER = "---"

_yaml_handler = YAMLHandler()


def is_delimiter(line: str) -> bool:
    return line.rstrip("\r") == DELIMITER


def split_frontmatter(raw: str) -> Tuple[str, str]:
    """Split raw post text into its metadata block and its body.

    The first ``---`` line opens the metadata block and the second closes it.
    Lines before the opening delimiter are dropped. Text without any
    delimiter is all body, with an empty metadata block. Only ``\\n`` ends a
    line, so the body keeps every other character as written.
    """
    metadata: List[str] = []
    body: List[str] = []
    delimiters = 0

    for line in raw.split("\n"):
        if delimiters < 2 and is_delimiter(line):
            delimiters += 1
            continue

        if delimiters == 1:
            metadata.append(line.rstrip("\r"))
        elif delimiters == 2:
            body.append(line)

    if delimiters == 0:
        return "", raw

    return "\n".join(metadata), "\n".join(body)


def decode_metadata(text: str, source: Optional[str] = None) -> PostMetadata:
    """Decode a metadata block into title, date and tags.

    Scalars are kept as the text written in the block, so ``yes`` stays
    ``"yes"`` and dates are not validated. Unknown keys are ignored and
    missing ones fall back to empty values.
    """
    try:
        data = (
            _yaml_handler.load(text, Loader=yaml.BaseLoader) if text.strip() else None
        )
    except yaml.YAMLError as e:
        raise DecodeError(f"Invalid metadata: {e}", source) from e

    if data is None:
        return PostMetadata()
    if not isinstance(data, dict):
        raise DecodeError(
            f"Metadata must be a mapping, got {type(data).__name__}", source
        )

    return PostMetadata(
        title=_to_text(data.get("title")),
        date=_to_text(data.get("date")),
        tags=_normalize_tags(data.get("tags")),
    )


def _to_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [_to_text(item) for item in value if item != ""]
    logger.warning(f"Unexpected tags value {value!r}, treating as a single tag")
    return [_to_text(value)]
