"""S3 implementation of ObjectStorage."""

import boto3
from boto3.s3.transfer import TransferConfig

# Minimum S3 multipart part size (except last) is 5 MB
MULTIPART_CHUNK_SIZE = 8 * 1024 * 1024  # 8 MB
MULTIPART_THRESHOLD = 100 * 1024 * 1024  # 100 MB: use multipart above this
DOWNLOAD_CHUNK_SIZE = 1024 * 1024


class S3ObjectStorage:
    """ObjectStorage implementation using S3."""

    def __init__(
        self,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._client = boto3.client(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Stream bucket/key to path in chunks; returns once the file is written and closed."""
        resp = self._client.get_object(Bucket=bucket, Key=key)
        body = resp["Body"]
        try:
            with open(path, "wb") as f:
                for chunk in body.iter_chunks(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    f.write(chunk)
        finally:
            body.close()

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        """
        Stream the file at path to bucket/key through the managed transfer.
        Files of MULTIPART_THRESHOLD bytes or more go up as multipart uploads
        in MULTIPART_CHUNK_SIZE parts. The file handle is closed on return.
        """
        config = TransferConfig(
            multipart_threshold=MULTIPART_THRESHOLD,
            multipart_chunksize=MULTIPART_CHUNK_SIZE,
        )
        with open(path, "rb") as f:
            self._client.upload_fileobj(f, bucket, key, Config=config)
