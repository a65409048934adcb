"""Translate service outcomes into MCP tool content or error results."""

import base64

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ImageContent

from gooddata_mcp.automation.models import ScheduleOutcome, ScheduleState
from gooddata_mcp.export.models import ExportOutcome
from gooddata_mcp.pdf.models import RenderedPage

SCHEDULED_MESSAGE = "Export scheduled"


def page_to_image(page: RenderedPage) -> ImageContent:
    return ImageContent(
        type="image",
        data=base64.b64encode(page.image_bytes).decode("ascii"),
        mimeType=page.mime_type,
    )


def export_content(outcome: ExportOutcome) -> list[ImageContent]:
    """Images in page order, or a ToolError when the export failed."""
    if outcome.failed:
        raise ToolError(outcome.message)
    return [page_to_image(page) for page in outcome.pages]


def schedule_content(outcome: ScheduleOutcome) -> str:
    """Confirmation text, or a ToolError naming which step failed."""
    if outcome.state is ScheduleState.CREATION_FAILED:
        raise ToolError(f"Automation creation failed: {outcome.error_payload}")
    if outcome.state is ScheduleState.TRIGGER_FAILED:
        raise ToolError(
            "Automation was scheduled, but the test trigger failed: "
            f"{outcome.error_payload}"
        )
    return SCHEDULED_MESSAGE
