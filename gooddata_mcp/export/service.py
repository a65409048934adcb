import anyio.to_thread

from gooddata_mcp.export.models import ExportOutcome
from gooddata_mcp.export.poller import PollController
from gooddata_mcp.export.submitter import ExportRequestSubmitter
from gooddata_mcp.logging.logger import Log
from gooddata_mcp.pdf.base import BasePdfRasterizer

EXPORT_FAILED_MESSAGE = "Export failed"


class ExportService:
    """Exports a visualization to one image per PDF page.

    Pipeline: submit -> poll -> rasterize. Poll exhaustion is reported in
    the outcome; submission and rendering errors propagate.
    """

    def __init__(
        self,
        submitter: ExportRequestSubmitter,
        poller: PollController,
        rasterizer: BasePdfRasterizer,
    ) -> None:
        self._submitter = submitter
        self._poller = poller
        self._rasterizer = rasterizer

    async def export_images(self, visualization_id: str) -> ExportOutcome:
        job = await self._submitter.submit(visualization_id)

        poll_outcome = await self._poller.poll(job)
        if poll_outcome.payload is None:
            Log.error(
                f"Export of visualization {visualization_id} failed",
                job_id=job.job_id,
                attempts=len(poll_outcome.attempts),
            )
            return ExportOutcome(job=job, failed=True, message=EXPORT_FAILED_MESSAGE)

        pages = await anyio.to_thread.run_sync(
            self._rasterizer.rasterize, poll_outcome.payload
        )
        Log.info(
            f"Exported visualization {visualization_id} to {len(pages)} images",
            job_id=job.job_id,
        )
        return ExportOutcome(job=job, pages=pages)
