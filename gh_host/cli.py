"""Typer application for managing and generating the blog."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import typer
import uvicorn

from gh_host.exceptions import GhHostError
from gh_host.services.posts_service import PostsService
from gh_host.services.site_generator import generate_site
from gh_host.settings import settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gh-host",
    help="Manage blog posts from the command line",
    add_completion=False,
)


@contextmanager
def handle_cli_errors() -> Iterator[None]:
    """Log a failed command and exit with status 1."""
    try:
        yield
    except (GhHostError, OSError, ValueError) as e:
        logger.error(str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.callback()
def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _posts_service() -> PostsService:
    return PostsService(settings.CONTENT_DIR)


@app.command()
def create(
    title: str = typer.Option(..., help="The title of the post"),
    content: str = typer.Option(..., help="The content of the post in Markdown"),
    tags: Optional[str] = typer.Option(None, help="Comma-separated tags"),
    date: Optional[str] = typer.Option(
        None, help="The date of the post in YYYY-MM-DD format"
    ),
) -> None:
    """Create a new post."""
    with handle_cli_errors():
        path = _posts_service().create_post(title, content, tags=tags, date=date)
    typer.echo(f"Created post: {path}")


@app.command()
def delete(
    slug: str = typer.Option(..., help="The slug of the post to delete"),
) -> None:
    """Delete a post."""
    with handle_cli_errors():
        path = _posts_service().delete_post(slug)
    typer.echo(f"Deleted post: {path}")


@app.command()
def update(
    slug: str = typer.Option(..., help="The slug of the post to update"),
    title: Optional[str] = typer.Option(None, help="The new title of the post"),
    content: Optional[str] = typer.Option(
        None, help="The new content of the post in Markdown"
    ),
    tags: Optional[str] = typer.Option(None, help="The new comma-separated tags"),
) -> None:
    """Update a post."""
    with handle_cli_errors():
        path = _posts_service().update_post(
            slug, title=title, content=content, tags=tags
        )
    typer.echo(f"Updated post: {path}")


@app.command()
def generate() -> None:
    """Generate the static site from the posts."""
    with handle_cli_errors():
        generate_site(settings)
    typer.echo("Site generated successfully!")


@app.command()
def serve() -> None:
    """Start the HTTP server to dispatch workflows."""
    logger.info(f"Server listening on :{settings.PORT}")
    uvicorn.run("gh_host.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    app()
