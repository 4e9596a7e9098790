"""Report models produced by the attachment sync."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OutcomeStatus(str, Enum):
    """Per-attachment result of a sync run."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    ERROR = "error"


# Upstream statuses that count as an accepted upload.
ACCEPTED_UPLOAD_STATUSES = frozenset({200, 201})


class _ReportModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AttachmentOutcome(_ReportModel):
    """Outcome of one attachment.

    ``status`` is the outcome state; the numeric upstream status, when an
    exchange happened, is carried in ``upstream_status``.
    """

    file_name: str
    status: OutcomeStatus
    reason: str | None = None
    upstream_status: int | None = None
    gateway_status: int | None = None
    message: str | None = None
    response: Any = None
    error_detail: str | None = None

    @classmethod
    def skipped(cls, file_name: str, file_type: str) -> "AttachmentOutcome":
        return cls(
            file_name=file_name,
            status=OutcomeStatus.SKIPPED,
            reason=f"Unsupported file type: {file_type}",
        )

    @classmethod
    def from_upstream(
        cls,
        file_name: str,
        upstream_status: int,
        response: Any = None,
        gateway_status: int | None = None,
    ) -> "AttachmentOutcome":
        if upstream_status in ACCEPTED_UPLOAD_STATUSES:
            return cls(
                file_name=file_name,
                status=OutcomeStatus.SUCCESS,
                upstream_status=upstream_status,
                gateway_status=gateway_status,
                message="File uploaded successfully",
                response=response,
            )
        return cls(
            file_name=file_name,
            status=OutcomeStatus.FAILED,
            upstream_status=upstream_status,
            gateway_status=gateway_status,
            message=f"Upload failed with status: {upstream_status}",
            response=response,
        )

    @classmethod
    def errored(cls, file_name: str, error: BaseException | str) -> "AttachmentOutcome":
        return cls(
            file_name=file_name,
            status=OutcomeStatus.ERROR,
            error_detail=str(error) or type(error).__name__,
            message="Failed to call gateway or parse response",
        )


class BatchReport(_ReportModel):
    """Aggregate result of one sync run, in discovery order."""

    status: str = "completed"
    record_id: str | None = None
    files_processed: int
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    results: tuple[AttachmentOutcome, ...] = ()

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[AttachmentOutcome], record_id: str | None = None) -> "BatchReport":
        results = tuple(outcomes)
        return cls(record_id=record_id, files_processed=len(results), results=results)

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for r in self.results if r.status == status.value)
