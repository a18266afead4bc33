from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PostMetadata(BaseModel):
    title: str = ""
    date: str = ""
    tags: List[str] = Field(default_factory=list)


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    date: str
    tags: Tuple[str, ...] = ()
    slug: str
    content: str
    base_url: str = ""


class RenderedPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    html: str
