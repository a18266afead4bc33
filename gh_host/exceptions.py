from typing import Optional


class GhHostError(Exception):
    """Base class for errors raised by gh-host."""


class DecodeError(GhHostError):
    """The metadata block of a post is not a valid YAML mapping."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class TemplateError(GhHostError):
    """A template could not be found, parsed or rendered."""

    def __init__(self, template_name: str, reason: str):
        self.template_name = template_name
        super().__init__(f"Template {template_name!r} failed: {reason}")


class PostNotFoundError(GhHostError):
    pass


class PostExistsError(GhHostError):
    pass


class DispatchError(GhHostError):
    """The GitHub API refused a repository dispatch."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error: {status_code} - {body}")


class DuplicatePageError(GhHostError):
    """Two rendered pages would be written to the same output file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"More than one page renders to {name!r}")
