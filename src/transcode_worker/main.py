"""
Entrypoint for the transcode worker. Loads settings from env, wires the S3 and
SNS adapters and converts the one configured object.

Exit code 0 once a terminal status (COMPLETE or ERROR) has been published;
1 when configuration is invalid, or PROCESSING or ERROR could not be published
(a failed COMPLETE publish is itself reported as ERROR).
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from .adapters.env_config import object_storage_from_settings, status_publisher_from_settings
from .config import get_settings
from .logging_config import configure_logging
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("transcode-worker: invalid configuration: %s", e)
        return 1
    configure_logging(settings.log_level)
    item = settings.work_item
    logger.info(
        "transcode-worker starting; input=s3://%s/%s output_bucket=%s",
        item.bucket,
        item.key,
        settings.output_bucket,
    )
    try:
        storage = object_storage_from_settings(settings)
        publisher = status_publisher_from_settings(settings)
        outcome = asyncio.run(
            run_pipeline(item, settings, storage=storage, publisher=publisher)
        )
    except Exception:
        logger.exception("transcode-worker: failed to report status for key=%s", item.key)
        return 1
    logger.info("transcode-worker finished: key=%s outcome=%s", item.key, outcome.value)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
