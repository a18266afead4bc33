from typing import Callable

import markdown

BodyRenderer = Callable[[str], str]


def render_markdown(body: str) -> str:
    """Convert a Markdown post body to HTML."""
    return markdown.markdown(body)
