"""Pytest fixtures for transcode-worker tests (moto-backed AWS resources, settings)."""

import os

import pytest
from moto import mock_aws

from transcode_worker.config import WorkerSettings


@pytest.fixture(scope="function")
def aws_credentials():
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def moto_aws(aws_credentials):
    """Enable moto mock for S3, SNS and SQS."""
    with mock_aws():
        yield


@pytest.fixture
def s3_buckets(moto_aws):
    """Create source and output S3 buckets."""
    import boto3

    client = boto3.client("s3", region_name="us-east-1")
    client.create_bucket(Bucket="test-source-bucket")
    client.create_bucket(Bucket="test-output-bucket")
    return "test-source-bucket", "test-output-bucket"


@pytest.fixture
def status_topic(moto_aws):
    """Create an SNS topic with an SQS subscription; return (topic_arn, queue_url)."""
    import boto3

    sns = boto3.client("sns", region_name="us-east-1")
    sqs = boto3.client("sqs", region_name="us-east-1")
    topic_arn = sns.create_topic(Name="test-status")["TopicArn"]
    queue_url = sqs.create_queue(QueueName="test-status-events")["QueueUrl"]
    queue_arn = sqs.get_queue_attributes(
        QueueUrl=queue_url, AttributeNames=["QueueArn"]
    )["Attributes"]["QueueArn"]
    sns.subscribe(
        TopicArn=topic_arn,
        Protocol="sqs",
        Endpoint=queue_arn,
        Attributes={"RawMessageDelivery": "true"},
    )
    return topic_arn, queue_url


@pytest.fixture
def settings(tmp_path) -> WorkerSettings:
    """Settings for one run with scratch files under tmp_path."""
    return WorkerSettings(
        output_bucket="out-bucket",
        sns_topic="arn:aws:sns:us-east-1:123456789012:status",
        input_bucket="src",
        input_source_key="talk.webm",
        ffmpeg_path="ffmpeg",
        ffprobe_path="ffprobe",
        scratch_dir=str(tmp_path),
    )
