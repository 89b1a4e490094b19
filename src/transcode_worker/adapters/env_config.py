"""
Build AWS adapter instances from WorkerSettings.

Settings come from the task environment (see config.WorkerSettings):
- OUTPUT_BUCKET, SNS_TOPIC, INPUT_BUCKET, INPUT_SOURCE_KEY (required)

Optional:
- AWS_REGION (default: boto3 resolution)
- AWS_ENDPOINT_URL (e.g. for LocalStack)
"""

from ..config import WorkerSettings
from .s3_storage import S3ObjectStorage
from .sns_publisher import SNSStatusPublisher


def object_storage_from_settings(settings: WorkerSettings) -> S3ObjectStorage:
    """Build S3ObjectStorage (uses default credentials; bucket names come from callers)."""
    return S3ObjectStorage(
        region_name=settings.aws_region or None,
        endpoint_url=settings.aws_endpoint_url or None,
    )


def status_publisher_from_settings(settings: WorkerSettings) -> SNSStatusPublisher:
    """Build SNSStatusPublisher for the status topic from SNS_TOPIC."""
    return SNSStatusPublisher(
        settings.sns_topic,
        region_name=settings.aws_region or None,
        endpoint_url=settings.aws_endpoint_url or None,
    )
