import anyio

from gooddata_mcp.automation.scheduler import AutomationScheduler
from gooddata_mcp.client.gooddata_client import GoodDataClient
from gooddata_mcp.config.settings import Settings
from gooddata_mcp.export.poller import PollController, SleepFn
from gooddata_mcp.export.service import ExportService
from gooddata_mcp.export.submitter import ExportRequestSubmitter
from gooddata_mcp.logging.logger import Log
from gooddata_mcp.pdf.pymupdf_adapter import PyMuPdfRasterizer
from gooddata_mcp.search.service import SearchService
from gooddata_mcp.server.tools import Services, build_server


def build_services(
    settings: Settings,
    client: GoodDataClient,
    sleep: SleepFn = anyio.sleep,
) -> Services:
    """Wire every service around one shared GoodData client."""
    poller = PollController(
        client,
        max_attempts=settings.export_max_poll_attempts,
        interval_seconds=settings.export_poll_interval_seconds,
        sleep=sleep,
    )
    export = ExportService(
        submitter=ExportRequestSubmitter(client),
        poller=poller,
        rasterizer=PyMuPdfRasterizer(scale=settings.render_scale),
    )
    scheduler = AutomationScheduler(client, settings.gooddata_notification_channel)
    return Services(search=SearchService(client), export=export, scheduler=scheduler)


async def serve(settings: Settings) -> None:
    async with GoodDataClient.from_settings(settings) as client:
        server = build_server(build_services(settings, client))
        Log.info(f"GoodData MCP server starting for workspace {client.workspace_id}")
        await server.run_stdio_async()
    Log.info("GoodData MCP server stopped")


def main() -> None:
    """Entry point: load settings -> configure logging -> serve over stdio."""
    settings = Settings()  # type: ignore[call-arg]
    Log.configure(settings.log_level)
    anyio.run(serve, settings)


if __name__ == "__main__":
    main()
