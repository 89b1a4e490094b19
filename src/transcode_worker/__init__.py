"""Single-shot worker: convert one stored WebM object to MP3 and report its status."""

from .errors import (
    CleanupWarning,
    DownloadError,
    NotificationError,
    ProbeError,
    TranscodeError,
    TranscodeWorkerError,
    UploadError,
)
from .interfaces import MessagePublisher, ObjectStorage
from .keys import derive_target_key
from .logging_config import configure_logging
from .models import (
    CompleteEvent,
    ConversionResult,
    ErrorEvent,
    ProcessingEvent,
    ProcessingStatus,
    StatusEvent,
    WorkItem,
    build_status_event,
    parse_status_message,
)
from .scratch import ScratchFiles

__version__ = "0.1.0"
__all__ = [
    "CleanupWarning",
    "CompleteEvent",
    "ConversionResult",
    "DownloadError",
    "ErrorEvent",
    "MessagePublisher",
    "NotificationError",
    "ObjectStorage",
    "ProbeError",
    "ProcessingEvent",
    "ProcessingStatus",
    "ScratchFiles",
    "StatusEvent",
    "TranscodeError",
    "TranscodeWorkerError",
    "UploadError",
    "WorkItem",
    "build_status_event",
    "configure_logging",
    "derive_target_key",
    "parse_status_message",
]
