"""Object publisher: upload the converted file to the output bucket."""

import logging
from pathlib import Path

from .errors import UploadError
from .interfaces import ObjectStorage

logger = logging.getLogger(__name__)


def upload(
    storage: ObjectStorage,
    bucket: str,
    target_key: str,
    source_path: str | Path,
) -> None:
    """Upload source_path to bucket/target_key. The store error is chained on UploadError."""
    logger.info("publish: uploading %s -> s3://%s/%s", source_path, bucket, target_key)
    try:
        storage.upload_file(bucket, target_key, str(source_path))
    except Exception as e:
        logger.error("publish: upload to s3://%s/%s failed: %s", bucket, target_key, e)
        raise UploadError(f"error uploading s3://{bucket}/{target_key}: {e}") from e
    logger.info("publish: uploaded s3://%s/%s", bucket, target_key)
