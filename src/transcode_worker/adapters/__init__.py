"""AWS implementations of the worker interfaces (S3 object storage, SNS status topic)."""

from .env_config import object_storage_from_settings, status_publisher_from_settings
from .s3_storage import S3ObjectStorage
from .sns_publisher import SNSStatusPublisher

__all__ = [
    "S3ObjectStorage",
    "SNSStatusPublisher",
    "object_storage_from_settings",
    "status_publisher_from_settings",
]
