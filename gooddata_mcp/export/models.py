from dataclasses import dataclass, field
from enum import Enum

from gooddata_mcp.pdf.models import RenderedPage


class ExportFormat(str, Enum):
    PDF = "PDF"


class PollStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    ERROR = "error"


class PollDecision(str, Enum):
    CONTINUE = "continue"
    DONE = "done"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class ExportJob:
    """A remote export job accepted by GoodData."""

    target_id: str
    job_id: str
    requested_format: ExportFormat = ExportFormat.PDF


@dataclass(frozen=True)
class PollAttempt:
    """One status check against an export job."""

    attempt_index: int
    status: PollStatus
    status_code: int
    payload: bytes | None = None


@dataclass
class PollOutcome:
    """Result of the polling loop: the artifact bytes, or None on exhaustion."""

    job: ExportJob
    attempts: list[PollAttempt] = field(default_factory=list)
    payload: bytes | None = None

    @property
    def succeeded(self) -> bool:
        return self.payload is not None


@dataclass
class ExportOutcome:
    """Pages rendered for one visualization export."""

    job: ExportJob
    pages: list[RenderedPage] = field(default_factory=list)
    failed: bool = False
    message: str = ""
