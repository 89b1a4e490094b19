"""
Worker config from environment.
Uses pydantic-settings so all env vars are validated and documented in one model.
Required values have no default: a missing or empty variable fails at startup.
"""

from __future__ import annotations

import tempfile

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import WorkItem

DEFAULT_FFMPEG_PATH = "/usr/local/bin/ffmpeg"
DEFAULT_FFPROBE_PATH = "/usr/local/bin/ffprobe"


class WorkerSettings(BaseSettings):
    """
    All environment variables used by the transcode worker.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Result bucket and status topic
    output_bucket: str = Field(..., min_length=1)
    sns_topic: str = Field(..., min_length=1)

    # The one object this invocation converts
    input_bucket: str = Field(..., min_length=1)
    input_source_key: str = Field(..., min_length=1)

    ffmpeg_path: str = DEFAULT_FFMPEG_PATH
    ffprobe_path: str = DEFAULT_FFPROBE_PATH
    scratch_dir: str = Field(default_factory=tempfile.gettempdir)

    aws_region: str | None = None
    aws_endpoint_url: str | None = None

    log_level: str = "INFO"

    @property
    def work_item(self) -> WorkItem:
        return WorkItem(bucket=self.input_bucket, key=self.input_source_key)


def get_settings() -> WorkerSettings:
    """Return validated settings from current environment."""
    return WorkerSettings()
