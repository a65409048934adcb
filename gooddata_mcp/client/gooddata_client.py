"""Async HTTP client for the GoodData Cloud (Tiger) REST API."""

from types import TracebackType
from typing import Any

import httpx

from gooddata_mcp.client.exceptions import GoodDataHTTPError, GoodDataRequestError
from gooddata_mcp.client.models import SearchResult
from gooddata_mcp.config.settings import Settings
from gooddata_mcp.logging.logger import Log

JSON_API_CONTENT_TYPE = "application/vnd.gooddata.api+json"
ERROR_STATUS_THRESHOLD = 400


class GoodDataClient:
    """Authenticated session bound to one GoodData workspace.

    Created once at startup and shared by every tool handler. The
    underlying connection pool lives until ``aclose`` is called.
    """

    def __init__(self, http_client: httpx.AsyncClient, workspace_id: str) -> None:
        self._http = http_client
        self._workspace_id = workspace_id

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "GoodDataClient":
        http_client = httpx.AsyncClient(
            base_url=settings.gooddata_host,
            headers={"Authorization": f"Bearer {settings.gooddata_token}"},
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )
        return cls(http_client, settings.gooddata_workspace)

    @property
    def workspace_id(self) -> str:
        return self._workspace_id

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "GoodDataClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def create_slides_export(
        self,
        *,
        file_name: str,
        visualization_ids: list[str],
        fmt: str = "PDF",
    ) -> str:
        """Start a slides export job and return its export id.

        Raises:
            GoodDataHTTPError: if the job is not accepted.
            GoodDataRequestError: if the host cannot be reached.
        """
        response = await self._send(
            "POST",
            f"/api/v1/actions/workspaces/{self._workspace_id}/export/slides",
            json={
                "format": fmt,
                "fileName": file_name,
                "visualizationIds": visualization_ids,
            },
        )
        self._raise_for_status(response, "create slides export")
        return str(response.json()["exportResult"])

    async def get_slides_export(self, export_id: str) -> httpx.Response:
        """Fetch the export artifact; status is left for the caller to judge."""
        return await self._send(
            "GET",
            f"/api/v1/actions/workspaces/{self._workspace_id}/export/slides/{export_id}",
        )

    async def semantic_search(
        self,
        question: str,
        object_types: list[str],
        *,
        deep_search: bool = True,
    ) -> list[SearchResult]:
        response = await self._send(
            "POST",
            f"/api/v1/actions/workspaces/{self._workspace_id}/ai/search",
            json={
                "question": question,
                "deepSearch": deep_search,
                "objectTypes": object_types,
            },
        )
        self._raise_for_status(response, "semantic search")
        return [SearchResult.from_api(item) for item in response.json().get("results", [])]

    async def post_raw(
        self,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST to an arbitrary API path without interpreting the status."""
        return await self._send("POST", path, json=json, headers=headers)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        Log.debug(f"GoodData {method} {path}")
        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.RequestError as exc:
            raise GoodDataRequestError(
                f"GoodData request {method} {path} failed: {exc}"
            ) from exc
        Log.debug(f"GoodData {method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if response.is_success:
            return
        body = response.text[:500]
        Log.error(f"GoodData {action} failed", status=response.status_code)
        raise GoodDataHTTPError(
            f"GoodData {action} returned {response.status_code}: {body}",
            status_code=response.status_code,
            body=body,
        )
