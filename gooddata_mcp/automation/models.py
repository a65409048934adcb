from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gooddata_mcp.automation.exceptions import InvalidCronError
from gooddata_mcp.client.gooddata_client import ERROR_STATUS_THRESHOLD

CRON_FIELDS = ("second", "minute", "hour", "day-of-month", "month", "day-of-week")


@dataclass(frozen=True)
class Schedule:
    """Six-field cron schedule, always evaluated in UTC by GoodData."""

    cron: str
    timezone: str = "UTC"

    @classmethod
    def parse(cls, cron: str) -> "Schedule":
        """Check the basic shape of ``cron`` and normalize its whitespace.

        Field contents are forwarded to GoodData unvalidated.
        """
        fields = cron.split()
        if len(fields) != len(CRON_FIELDS):
            raise InvalidCronError(
                f"Cron must have {len(CRON_FIELDS)} fields "
                f"({' '.join(f.upper() for f in CRON_FIELDS)}), got {len(fields)}: '{cron}'"
            )
        return cls(cron=" ".join(fields))


@dataclass(frozen=True)
class AutomationDefinition:
    """A recurring PDF export of one visualization sent by email."""

    automation_id: str
    schedule: Schedule
    visualization_id: str
    recipients: tuple[str, ...]
    notification_channel_id: str
    export_format: str = "PDF"
    file_name: str = "MyExport.pdf"
    title: str = "My automation"
    description: str = "My automation description"
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_api_document(self) -> dict[str, Any]:
        """Build the JSON:API document for the automations entity endpoint."""
        return {
            "data": {
                "type": "automation",
                "id": self.automation_id,
                "attributes": {
                    "title": self.title,
                    "description": self.description,
                    "tags": list(self.tags),
                    "state": "ACTIVE",
                    "schedule": {
                        "cron": self.schedule.cron,
                        "timezone": self.schedule.timezone,
                    },
                    "tabularExports": [
                        {
                            "requestPayload": {
                                "format": self.export_format,
                                "fileName": self.file_name,
                                "visualizationObject": self.visualization_id,
                            },
                        },
                    ],
                    "externalRecipients": [{"email": email} for email in self.recipients],
                },
                "relationships": {
                    "notificationChannel": {
                        "data": {
                            "type": "notificationChannel",
                            "id": self.notification_channel_id,
                        },
                    },
                },
            },
        }


def is_success_status(status_code: int) -> bool:
    return status_code < ERROR_STATUS_THRESHOLD


class ScheduleState(str, Enum):
    CREATION_FAILED = "creation_failed"
    TRIGGER_FAILED = "trigger_failed"
    TRIGGERED = "triggered"


@dataclass(frozen=True)
class TriggerResult:
    """Response of the one-off validation trigger."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return is_success_status(self.status_code)


@dataclass(frozen=True)
class ScheduleOutcome:
    """Terminal state of one scheduling request."""

    definition: AutomationDefinition
    state: ScheduleState
    error_payload: str = ""
    trigger: TriggerResult | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is ScheduleState.TRIGGERED

    @property
    def automation_exists(self) -> bool:
        return self.state is not ScheduleState.CREATION_FAILED
