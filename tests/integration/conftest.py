from unittest.mock import AsyncMock

import httpx
import pytest

from gooddata_mcp.client.gooddata_client import GoodDataClient
from gooddata_mcp.config.settings import Settings
from gooddata_mcp.main import build_services
from gooddata_mcp.server.tools import Services


def _copy(template: httpx.Response) -> httpx.Response:
    return httpx.Response(
        template.status_code, content=template.content, headers=template.headers
    )


class FakeGoodData:
    """Scripted GoodData host: routes requests and records them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], list[httpx.Response]] = {}
        self.suffix_routes: list[tuple[str, str, httpx.Response]] = []

    def add(self, method: str, path: str, *responses: httpx.Response) -> None:
        self.routes.setdefault((method, path), []).extend(responses)

    def add_suffix(self, method: str, suffix: str, response: httpx.Response) -> None:
        self.suffix_routes.append((method, suffix, response))

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for method, suffix, response in self.suffix_routes:
            if request.method == method and request.url.path.endswith(suffix):
                return _copy(response)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, text=f"unexpected {request.method} {request.url.path}")
        return _copy(queue.pop(0) if len(queue) > 1 else queue[0])


@pytest.fixture()
def fake_gooddata() -> FakeGoodData:
    return FakeGoodData()


@pytest.fixture()
def settings(gooddata_env: dict[str, str]) -> Settings:
    return Settings(_env_file=None, export_max_poll_attempts=4)  # type: ignore[call-arg]


@pytest.fixture()
def client(settings: Settings, fake_gooddata: FakeGoodData) -> GoodDataClient:
    return GoodDataClient.from_settings(
        settings, transport=httpx.MockTransport(fake_gooddata.handle)
    )


@pytest.fixture()
def services(settings: Settings, client: GoodDataClient) -> Services:
    """Real services with polling delays stubbed out."""
    return build_services(settings, client, sleep=AsyncMock())
