import pytest

from gooddata_mcp.automation.exceptions import InvalidCronError
from gooddata_mcp.automation.models import (
    AutomationDefinition,
    Schedule,
    ScheduleOutcome,
    ScheduleState,
    TriggerResult,
    is_success_status,
)
from gooddata_mcp.client.gooddata_client import ERROR_STATUS_THRESHOLD


def _definition() -> AutomationDefinition:
    return AutomationDefinition(
        automation_id="automation-1",
        schedule=Schedule.parse("0 0 9 * * MON"),
        visualization_id="v1",
        recipients=("a@b.com",),
        notification_channel_id="channel-1",
    )


class TestSchedule:
    def test_accepts_six_fields(self) -> None:
        schedule = Schedule.parse("0 0 9 * * MON")
        assert schedule.cron == "0 0 9 * * MON"
        assert schedule.timezone == "UTC"

    def test_normalizes_whitespace(self) -> None:
        assert Schedule.parse("  0 0  9 * *\tMON ").cron == "0 0 9 * * MON"

    @pytest.mark.parametrize("cron", ["", "0 9 * * MON", "0 0 9 * * MON 2030"])
    def test_rejects_wrong_field_count(self, cron: str) -> None:
        with pytest.raises(InvalidCronError, match="6 fields"):
            Schedule.parse(cron)

    def test_field_contents_are_not_validated(self) -> None:
        assert Schedule.parse("a b c d e f").cron == "a b c d e f"


class TestAutomationDocument:
    def test_builds_json_api_document(self) -> None:
        assert _definition().to_api_document() == {
            "data": {
                "type": "automation",
                "id": "automation-1",
                "attributes": {
                    "title": "My automation",
                    "description": "My automation description",
                    "tags": [],
                    "state": "ACTIVE",
                    "schedule": {"cron": "0 0 9 * * MON", "timezone": "UTC"},
                    "tabularExports": [
                        {
                            "requestPayload": {
                                "format": "PDF",
                                "fileName": "MyExport.pdf",
                                "visualizationObject": "v1",
                            },
                        },
                    ],
                    "externalRecipients": [{"email": "a@b.com"}],
                },
                "relationships": {
                    "notificationChannel": {
                        "data": {"type": "notificationChannel", "id": "channel-1"},
                    },
                },
            },
        }


class TestScheduleOutcome:
    def test_states(self) -> None:
        definition = _definition()
        failed = ScheduleOutcome(definition, ScheduleState.CREATION_FAILED, "bad")
        partial = ScheduleOutcome(
            definition, ScheduleState.TRIGGER_FAILED, "oops", TriggerResult(500, "oops")
        )
        done = ScheduleOutcome(definition, ScheduleState.TRIGGERED, trigger=TriggerResult(204))

        assert (failed.succeeded, failed.automation_exists) == (False, False)
        assert (partial.succeeded, partial.automation_exists) == (False, True)
        assert (done.succeeded, done.automation_exists) == (True, True)
        assert done.trigger is not None and done.trigger.ok


class TestErrorThreshold:
    @pytest.mark.parametrize(
        ("status_code", "expected"), [(200, True), (399, True), (400, False), (503, False)]
    )
    def test_success_status_boundary(self, status_code: int, expected: bool) -> None:
        assert is_success_status(status_code) is expected
        assert TriggerResult(status_code).ok is expected

    def test_threshold_is_shared_with_client(self) -> None:
        assert is_success_status(ERROR_STATUS_THRESHOLD - 1)
        assert not is_success_status(ERROR_STATUS_THRESHOLD)
