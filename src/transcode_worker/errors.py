"""
Error kinds raised by the pipeline steps.

Each step raises its own subclass so the orchestrator can report which phase
failed; the original exception is always chained as __cause__.
"""


class TranscodeWorkerError(Exception):
    """Base class for pipeline step failures."""


class NotificationError(TranscodeWorkerError):
    """Publishing a status event failed."""


class DownloadError(TranscodeWorkerError):
    """Fetching the source object to scratch storage failed."""


class TranscodeError(TranscodeWorkerError):
    """ffmpeg could not be started or exited non-zero."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ProbeError(TranscodeWorkerError):
    """ffprobe could not be started, exited non-zero, or printed no usable duration."""


class UploadError(TranscodeWorkerError):
    """Writing the result object to the output bucket failed."""


class CleanupWarning(UserWarning):
    """
    Log tag for a scratch file that could not be removed.

    Only its name is used, as a prefix on the WARNING record written by
    scratch.remove_scratch_files; it is never raised nor passed to warnings.warn.
    """
