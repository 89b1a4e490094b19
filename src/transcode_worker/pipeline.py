"""
Pipeline orchestrator: report PROCESSING, fetch, transcode, probe, upload,
report COMPLETE or ERROR.

Blocking boto3 calls (status publish, download, upload) run via
asyncio.to_thread; ffmpeg is awaited as a child process; the duration probe
blocks the loop on purpose. Scratch files are removed whatever the outcome.
"""

import asyncio
import logging
import traceback
from enum import Enum

from .config import WorkerSettings
from .fetch import download
from .interfaces import MessagePublisher, ObjectStorage
from .keys import derive_target_key
from .models import ConversionResult, ProcessingStatus, WorkItem
from .probe import probe_duration
from .publish import upload
from .scratch import ScratchFiles
from .status import report_status
from .transcode import transcode

logger = logging.getLogger(__name__)


class PipelineOutcome(str, Enum):
    """How a fully reported run ended."""

    COMPLETED = "completed"
    FAILED = "failed"


async def _report(
    publisher: MessagePublisher,
    item: WorkItem,
    status: ProcessingStatus,
    detail: object = None,
) -> None:
    await asyncio.to_thread(report_status, publisher, item.bucket, item.key, status, detail)


async def convert_item(
    item: WorkItem,
    settings: WorkerSettings,
    storage: ObjectStorage,
    scratch: ScratchFiles,
) -> ConversionResult:
    """
    Fetch, transcode, probe and upload one item using the given scratch paths.

    Does not clean up on success; the caller owns the scratch files.
    """
    target_key = derive_target_key(item.key)
    await asyncio.to_thread(download, storage, item.bucket, item.key, scratch.source_path)
    await transcode(scratch.source_path, scratch.target_path, ffmpeg_path=settings.ffmpeg_path)
    duration = probe_duration(scratch.target_path, ffprobe_path=settings.ffprobe_path)
    await asyncio.to_thread(
        upload, storage, settings.output_bucket, target_key, scratch.target_path
    )
    return ConversionResult(target_key=target_key, duration_seconds=duration)


async def run_pipeline(
    item: WorkItem,
    settings: WorkerSettings,
    *,
    storage: ObjectStorage,
    publisher: MessagePublisher,
) -> PipelineOutcome:
    """
    Process one work item and report exactly one PROCESSING and one terminal event.

    Step failures, including a failed COMPLETE publish, are reported as ERROR
    and return FAILED. Only a failure to publish PROCESSING or ERROR propagates
    (NotificationError); if PROCESSING cannot be published nothing else is
    attempted.
    """
    await _report(publisher, item, ProcessingStatus.PROCESSING)
    scratch = ScratchFiles.for_key(item.key, settings.scratch_dir)
    logger.info(
        "pipeline: key=%s scratch source=%s target=%s",
        item.key,
        scratch.source_path,
        scratch.target_path,
    )
    try:
        try:
            result = await convert_item(item, settings, storage, scratch)
        finally:
            scratch.cleanup()
        await _report(publisher, item, ProcessingStatus.COMPLETE, result)
    except Exception:
        logger.exception("pipeline: error found during processing (key=%s)", item.key)
        await _report(publisher, item, ProcessingStatus.ERROR, traceback.format_exc())
        return PipelineOutcome.FAILED
    logger.info(
        "pipeline: key=%s complete result_key=%s duration=%ss",
        item.key,
        result.target_key,
        result.duration_seconds,
    )
    return PipelineOutcome.COMPLETED
