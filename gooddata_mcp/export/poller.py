"""Fixed-interval polling of export jobs with a hard attempt cap."""

from collections.abc import Awaitable, Callable

import anyio
import httpx

from gooddata_mcp.client.gooddata_client import ERROR_STATUS_THRESHOLD, GoodDataClient
from gooddata_mcp.export.models import (
    ExportJob,
    PollAttempt,
    PollDecision,
    PollOutcome,
    PollStatus,
)
from gooddata_mcp.logging.logger import Log

COMPLETE_STATUS = 200

SleepFn = Callable[[float], Awaitable[None]]


def classify(status_code: int) -> PollStatus:
    """Map an HTTP status of the export endpoint to a poll status."""
    if status_code == COMPLETE_STATUS:
        return PollStatus.READY
    if status_code >= ERROR_STATUS_THRESHOLD:
        return PollStatus.ERROR
    return PollStatus.PENDING


def decide(status_code: int, attempt_index: int, max_attempts: int) -> PollDecision:
    """Decide what follows the attempt at ``attempt_index`` (0-based).

    Only the complete sentinel stops polling early. Any other status
    continues until the attempt budget is spent.
    """
    if status_code == COMPLETE_STATUS:
        return PollDecision.DONE
    if attempt_index + 1 >= max_attempts:
        return PollDecision.EXHAUSTED
    return PollDecision.CONTINUE


class PollController:
    """Polls one export job sequentially until ready or out of attempts."""

    def __init__(
        self,
        client: GoodDataClient,
        *,
        max_attempts: int = 10,
        interval_seconds: float = 3.0,
        sleep: SleepFn = anyio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._client = client
        self._max_attempts = max_attempts
        self._interval_seconds = interval_seconds
        self._sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    async def poll(self, job: ExportJob) -> PollOutcome:
        """Return the artifact bytes, or an outcome without payload on exhaustion.

        Transport errors propagate; they do not consume an attempt.
        """
        outcome = PollOutcome(job=job)
        for attempt_index in range(self._max_attempts):
            response = await self._client.get_slides_export(job.job_id)
            decision = decide(response.status_code, attempt_index, self._max_attempts)
            outcome.attempts.append(self._record(attempt_index, response, decision))
            Log.debug(
                f"Export job {job.job_id} poll {attempt_index + 1}/{self._max_attempts}",
                status=response.status_code,
                decision=decision.value,
            )

            if decision is PollDecision.DONE:
                outcome.payload = response.content
                Log.info(
                    f"Export job {job.job_id} ready after {attempt_index + 1} attempts "
                    f"({len(response.content)} bytes)"
                )
                return outcome
            if decision is PollDecision.EXHAUSTED:
                break
            await self._sleep(self._interval_seconds)

        Log.warning(
            f"Export job {job.job_id} not ready after {self._max_attempts} attempts"
        )
        return outcome

    @staticmethod
    def _record(
        attempt_index: int,
        response: httpx.Response,
        decision: PollDecision,
    ) -> PollAttempt:
        return PollAttempt(
            attempt_index=attempt_index,
            status=classify(response.status_code),
            status_code=response.status_code,
            payload=response.content if decision is PollDecision.DONE else None,
        )
