from fastapi.testclient import TestClient

from gh_host.main import app
from gh_host.security import get_settings
from gh_host.settings import Settings


def test_root_endpoint():
    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "gh-host API is running"}


def test_dispatch_route_is_mounted():
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[get_settings] = lambda: Settings(
        GH_HOST_SECRET="secret", GITHUB_TOKEN="token", GITHUB_REPOSITORY="octo/blog"
    )
    try:
        with TestClient(app) as client:
            res = client.post("/dispatch-workflow", json={"secret": "wrong"})
            assert res.status_code == 401
    finally:
        app.dependency_overrides = original_overrides
