"""
FFmpeg-based audio conversion with one fixed profile.

Profile: drop video (-vn), 128k audio bitrate, 44100 Hz sample rate, overwrite
the destination (-y). ffmpeg inherits this process's stdout/stderr so its
diagnostics land in the task log.
"""

import asyncio
import logging
from pathlib import Path

from .config import DEFAULT_FFMPEG_PATH
from .errors import TranscodeError
from .scratch import remove_scratch_files

logger = logging.getLogger(__name__)

AUDIO_BITRATE = "128k"
AUDIO_SAMPLE_RATE = 44100


def build_ffmpeg_command(
    source_path: str | Path,
    target_path: str | Path,
    *,
    ffmpeg_path: str,
) -> list[str]:
    """Return the ffmpeg argv for converting source_path into target_path."""
    return [
        ffmpeg_path,
        "-i",
        str(source_path),
        "-vn",
        "-ab",
        AUDIO_BITRATE,
        "-ar",
        str(AUDIO_SAMPLE_RATE),
        "-y",
        str(target_path),
    ]


async def transcode(
    source_path: str | Path,
    target_path: str | Path,
    *,
    ffmpeg_path: str = DEFAULT_FFMPEG_PATH,
) -> None:
    """
    Convert source_path into target_path and wait for ffmpeg to exit.

    On spawn failure or a non-zero exit code both scratch paths are removed
    before TranscodeError is raised.
    """
    cmd = build_ffmpeg_command(source_path, target_path, ffmpeg_path=ffmpeg_path)
    logger.info("transcode: %s -> %s", source_path, target_path)
    try:
        proc = await asyncio.create_subprocess_exec(*cmd)
    except OSError as e:
        logger.error("transcode: could not start ffmpeg (%s): %s", ffmpeg_path, e)
        remove_scratch_files(source_path, target_path)
        raise TranscodeError(f"ffmpeg could not be started ({ffmpeg_path}): {e}") from e
    exit_code = await proc.wait()
    if exit_code != 0:
        logger.error("transcode: ffmpeg exited with code %s. see logs for more details", exit_code)
        remove_scratch_files(source_path, target_path)
        raise TranscodeError(
            f"error processing ffmpeg (exit code {exit_code}). see logs for more details",
            exit_code=exit_code,
        )
    logger.info("transcode: ffmpeg completed successfully")
