"""Create an email export automation and validate it with a manual trigger."""

import uuid
from collections.abc import Callable

from gooddata_mcp.automation.models import (
    AutomationDefinition,
    Schedule,
    ScheduleOutcome,
    ScheduleState,
    TriggerResult,
    is_success_status,
)
from gooddata_mcp.client.gooddata_client import JSON_API_CONTENT_TYPE, GoodDataClient
from gooddata_mcp.logging.logger import Log


def random_automation_id() -> str:
    return f"automation-{uuid.uuid4().hex}"


class AutomationScheduler:
    """Two-step remote mutation: create the automation, then trigger it once."""

    def __init__(
        self,
        client: GoodDataClient,
        notification_channel_id: str,
        *,
        id_factory: Callable[[], str] = random_automation_id,
    ) -> None:
        self._client = client
        self._notification_channel_id = notification_channel_id
        self._id_factory = id_factory

    def build_definition(
        self, visualization_id: str, email: str, cron: str
    ) -> AutomationDefinition:
        """Raises InvalidCronError if ``cron`` does not have six fields."""
        return AutomationDefinition(
            automation_id=self._id_factory(),
            schedule=Schedule.parse(cron),
            visualization_id=visualization_id,
            recipients=(email,),
            notification_channel_id=self._notification_channel_id,
        )

    async def schedule(self, visualization_id: str, email: str, cron: str) -> ScheduleOutcome:
        definition = self.build_definition(visualization_id, email, cron)
        workspace_id = self._client.workspace_id

        created = await self._client.post_raw(
            f"/api/v1/entities/workspaces/{workspace_id}/automations",
            json=definition.to_api_document(),
            headers={"Content-Type": JSON_API_CONTENT_TYPE},
        )
        if not is_success_status(created.status_code):
            Log.error(
                f"Automation {definition.automation_id} creation failed",
                status=created.status_code,
            )
            return ScheduleOutcome(
                definition=definition,
                state=ScheduleState.CREATION_FAILED,
                error_payload=created.text,
            )
        Log.info(f"Automation {definition.automation_id} created", cron=definition.schedule.cron)

        triggered = await self._client.post_raw(
            f"/api/v1/actions/workspaces/{workspace_id}"
            f"/automations/{definition.automation_id}/trigger"
        )
        trigger = TriggerResult(status_code=triggered.status_code, body=triggered.text)
        if not trigger.ok:
            Log.warning(
                f"Automation {definition.automation_id} created but test trigger failed",
                status=trigger.status_code,
            )
            return ScheduleOutcome(
                definition=definition,
                state=ScheduleState.TRIGGER_FAILED,
                error_payload=trigger.body,
                trigger=trigger,
            )

        Log.info(f"Automation {definition.automation_id} triggered")
        return ScheduleOutcome(
            definition=definition,
            state=ScheduleState.TRIGGERED,
            trigger=trigger,
        )
