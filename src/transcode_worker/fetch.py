"""Object fetcher: stream the source object into a local scratch file."""

import logging
from pathlib import Path

from .errors import DownloadError
from .interfaces import ObjectStorage

logger = logging.getLogger(__name__)


def download(
    storage: ObjectStorage,
    bucket: str,
    source_key: str,
    dest_path: str | Path,
) -> None:
    """
    Download bucket/source_key to dest_path, overwriting any existing file.

    Returns only after the file is fully written. On failure raises DownloadError;
    dest_path may then hold partial bytes or not exist at all.
    """
    logger.info("fetch: downloading s3://%s/%s -> %s", bucket, source_key, dest_path)
    try:
        storage.download_file(bucket, source_key, str(dest_path))
    except Exception as e:
        logger.error("fetch: error writing %s from s3://%s/%s: %s", dest_path, bucket, source_key, e)
        raise DownloadError(
            f"error downloading s3://{bucket}/{source_key} to {dest_path}: {e}"
        ) from e
    logger.info("fetch: file written successfully (%s)", dest_path)
