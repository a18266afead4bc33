import httpx

from gh_host.dependencies import get_dispatch_service
from gh_host.services.dispatch_service import DispatchService
from gh_host.settings import Settings


def test_get_dispatch_service_constructs_service_and_closes_client():
    current = Settings(GITHUB_REPOSITORY="octo/blog")
    gen = get_dispatch_service(current_settings=current)

    svc = next(gen)

    assert isinstance(svc, DispatchService)
    assert svc.settings is current
    assert isinstance(svc.client, httpx.Client)

    gen.close()
    assert svc.client.is_closed
