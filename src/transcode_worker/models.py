"""Pydantic models for the work item, status events and conversion result."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ProcessingStatus(str, Enum):
    """Phase reported on the status topic."""

    PROCESSING = "PROCESSING"
    ERROR = "ERROR"
    COMPLETE = "COMPLETE"


class WorkItem(BaseModel):
    """The single (bucket, key) this invocation converts."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., min_length=1, description="Source bucket name")
    key: str = Field(..., min_length=1, description="Source object key, e.g. talk.webm")


class ConversionResult(BaseModel):
    """Outcome of a successful transcode + probe + upload; becomes the COMPLETE detail."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_key: str = Field(..., alias="resultKey")
    duration_seconds: int = Field(..., ge=0, alias="durationSeconds")


# --- Status events (discriminated union by status) ---

class _StatusEventBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    bucket: str
    key: str

    def to_message(self) -> str:
        """Serialize to the JSON text published on the status topic."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ProcessingEvent(_StatusEventBase):
    """Work has started; carries no detail."""

    status: Literal["PROCESSING"] = "PROCESSING"
    detail: None = None


class ErrorEvent(_StatusEventBase):
    """Pipeline failed; detail is the diagnostic text (traceback)."""

    status: Literal["ERROR"] = "ERROR"
    detail: str = Field(..., min_length=1)


class CompleteEvent(_StatusEventBase):
    """Pipeline finished; detail is {resultKey, durationSeconds}."""

    status: Literal["COMPLETE"] = "COMPLETE"
    detail: ConversionResult


StatusEventUnion = ProcessingEvent | ErrorEvent | CompleteEvent
StatusEvent = Annotated[StatusEventUnion, Field(discriminator="status")]

_status_event_adapter: TypeAdapter[StatusEventUnion] = TypeAdapter(StatusEvent)


def build_status_event(
    bucket: str,
    key: str,
    status: ProcessingStatus | str,
    detail: Any = None,
) -> StatusEventUnion:
    """
    Build the event variant for status.

    Raises ValueError (pydantic ValidationError) when detail does not fit the
    variant, e.g. a dict for ERROR or a missing detail for COMPLETE.
    """
    data: dict[str, Any] = {
        "bucket": bucket,
        "key": key,
        "status": ProcessingStatus(status).value,
        "detail": detail,
    }
    return _status_event_adapter.validate_python(data)


def parse_status_message(message: str | bytes) -> StatusEventUnion:
    """Parse a published status message back into its event variant."""
    return _status_event_adapter.validate_json(message)
