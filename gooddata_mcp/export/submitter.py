from gooddata_mcp.client.gooddata_client import GoodDataClient
from gooddata_mcp.export.models import ExportFormat, ExportJob
from gooddata_mcp.logging.logger import Log


class ExportRequestSubmitter:
    """Creates a slides export job for a single visualization.

    Submission is one-shot: any client error propagates to the caller.
    """

    FILE_NAME = "export.pdf"

    def __init__(self, client: GoodDataClient) -> None:
        self._client = client

    async def submit(self, visualization_id: str) -> ExportJob:
        export_id = await self._client.create_slides_export(
            file_name=self.FILE_NAME,
            visualization_ids=[visualization_id],
            fmt=ExportFormat.PDF.value,
        )
        Log.info(f"Export job {export_id} submitted for visualization {visualization_id}")
        return ExportJob(
            target_id=visualization_id,
            job_id=export_id,
            requested_format=ExportFormat.PDF,
        )
