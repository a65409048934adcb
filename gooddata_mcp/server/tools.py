from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ImageContent

from gooddata_mcp.automation.exceptions import InvalidCronError
from gooddata_mcp.automation.scheduler import AutomationScheduler
from gooddata_mcp.export.service import ExportService
from gooddata_mcp.logging.logger import Log
from gooddata_mcp.search.service import SearchService
from gooddata_mcp.server.content import export_content, schedule_content

SCHEDULE_DESCRIPTION = (
    "Schedule a visualization export over email.\n"
    "Cron format must be: SECOND MINUTE HOUR DAY-OF-MONTH MONTH DAY-OF-WEEK\n"
    "For example, every Monday at 9am would be: 0 0 9 * * MON"
)


@dataclass(frozen=True)
class Services:
    """Everything the tool handlers need, built once at startup."""

    search: SearchService
    export: ExportService
    scheduler: AutomationScheduler


def build_server(services: Services, name: str = "GoodData") -> FastMCP:
    """Create the MCP server and register all GoodData tools."""
    server = FastMCP(name)

    @server.tool(
        name="visualization_search",
        description="Find relevant visualizations by search term",
        structured_output=False,
    )
    async def visualization_search(search_term: str) -> str:
        Log.info("tool: visualization_search")
        lines = await services.search.search(search_term, "visualization")
        return "\n".join(lines)

    @server.tool(
        name="dashboard_search",
        description="Find relevant dashboards by search term",
        structured_output=False,
    )
    async def dashboard_search(search_term: str) -> str:
        Log.info("tool: dashboard_search")
        lines = await services.search.search(search_term, "dashboard")
        return "\n".join(lines)

    @server.tool(
        name="visualization_png_export",
        description="Export a visualization to image",
        structured_output=False,
    )
    async def visualization_png_export(visualizationId: str) -> list[ImageContent]:  # noqa: N803
        Log.info(f"tool: visualization_png_export visualizationId={visualizationId}")
        outcome = await services.export.export_images(visualizationId)
        return export_content(outcome)

    @server.tool(
        name="visualization_schedule",
        description=SCHEDULE_DESCRIPTION,
        structured_output=False,
    )
    async def visualization_schedule(
        visualizationId: str,  # noqa: N803
        email: str,
        cron: str,
    ) -> str:
        Log.info(f"tool: visualization_schedule visualizationId={visualizationId}")
        try:
            outcome = await services.scheduler.schedule(visualizationId, email, cron)
        except InvalidCronError as exc:
            raise ToolError(str(exc)) from exc
        return schedule_content(outcome)

    return server
