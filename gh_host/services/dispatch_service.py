import logging
from typing import Optional

import httpx

from gh_host.exceptions import DispatchError
from gh_host.schemas.dispatch import DispatchRequest
from gh_host.settings import Settings, settings

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class DispatchService:
    """Trigger GitHub repository_dispatch events for the site workflows."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        current_settings: Optional[Settings] = None,
    ):
        self.settings = current_settings or settings
        if client is None:
            client = httpx.Client(timeout=httpx.Timeout(10.0))
        self.client = client

    def dispatch_url(self) -> str:
        owner, name = self.settings.github_owner_repo
        api_url = self.settings.GITHUB_API_URL.rstrip("/")
        return f"{api_url}/repos/{owner}/{name}/dispatches"

    def dispatch(self, request: DispatchRequest) -> None:
        payload = {
            "event_type": request.event_type,
            "client_payload": request.client_payload(),
        }
        response = self.client.post(
            self.dispatch_url(),
            json=payload,
            headers={
                "Accept": GITHUB_ACCEPT,
                "Authorization": f"Bearer {self.settings.GITHUB_TOKEN}",
            },
        )

        if response.status_code != httpx.codes.NO_CONTENT:
            logger.error(
                f"GitHub API error: {response.status_code} - {response.text}"
            )
            raise DispatchError(response.status_code, response.text)

        logger.info(f"Dispatched {request.event_type} for {self.settings.GITHUB_REPOSITORY}")
