from typing import Dict

from pydantic import BaseModel


class DispatchRequest(BaseModel):
    title: str = ""
    content: str = ""
    tags: str = ""
    slug: str = ""
    workflow: str = ""
    secret: str = ""

    @property
    def event_type(self) -> str:
        return self.workflow.removesuffix(".yml")

    def client_payload(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "content": self.content,
            "tags": self.tags,
            "slug": self.slug,
        }


class DispatchResponse(BaseModel):
    message: str
