"""
FFprobe-based duration measurement.

Runs ffprobe synchronously: the caller (and its event loop) is blocked until
ffprobe exits. The probe is cheap and only ever runs after transcoding.
"""

import logging
import math
import subprocess
from pathlib import Path

from .config import DEFAULT_FFPROBE_PATH
from .errors import ProbeError

logger = logging.getLogger(__name__)


def build_ffprobe_command(file_path: str | Path, *, ffprobe_path: str) -> list[str]:
    """Return the ffprobe argv that prints only format=duration as a bare number."""
    return [
        ffprobe_path,
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=nw=1:nk=1",
        str(file_path),
    ]


def parse_duration(output: str) -> int:
    """
    Parse ffprobe's duration output and round up to whole seconds.

    "12.1" -> 13, "12.0" -> 12. Raises ProbeError for empty, non-numeric
    (e.g. "N/A"), non-finite or negative values.
    """
    text = output.strip()
    try:
        seconds = float(text)
    except ValueError as e:
        raise ProbeError(f"ffprobe returned unparseable duration: {text!r}") from e
    if not math.isfinite(seconds) or seconds < 0:
        raise ProbeError(f"ffprobe returned invalid duration: {text!r}")
    return math.ceil(seconds)


def probe_duration(
    file_path: str | Path,
    *,
    ffprobe_path: str = DEFAULT_FFPROBE_PATH,
) -> int:
    """
    Return the media duration of file_path in whole seconds (rounded up).

    Raises:
        ProbeError: ffprobe missing, exited non-zero, or printed no usable number.
    """
    logger.info("probe: getting file duration of %s", file_path)
    cmd = build_ffprobe_command(file_path, ffprobe_path=ffprobe_path)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ProbeError(f"ffprobe could not be started ({ffprobe_path}): {e}") from e
    logger.debug("probe: exit=%s stdout=%r stderr=%r", result.returncode, result.stdout, result.stderr)
    if result.returncode != 0:
        logger.error("probe: ffprobe failed (exit %s): %s", result.returncode, result.stderr.strip())
        raise ProbeError(f"ffprobe error (exit {result.returncode}): {result.stderr.strip()}")
    duration = parse_duration(result.stdout)
    logger.info("probe: %s duration=%ss", file_path, duration)
    return duration
