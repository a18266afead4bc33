import httpx
from fastapi import Depends

from gh_host.security import get_settings
from gh_host.services.dispatch_service import DispatchService


def get_dispatch_service(current_settings=Depends(get_settings)):
    with httpx.Client(timeout=httpx.Timeout(10.0)) as client:
        yield DispatchService(client=client, current_settings=current_settings)
