"""
Cloud-agnostic interfaces for object storage and the status message sink.

Implementations (S3 and SNS) live in the adapters subpackage. Pipeline logic
depends on these interfaces and receives the implementation from main.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: stream objects to and from local files."""

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Stream bucket/key into the local file at path, overwriting it."""
        ...

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        """Stream the local file at path to bucket/key."""
        ...


@runtime_checkable
class MessagePublisher(Protocol):
    """Publish text messages to a fixed topic."""

    def publish(self, message: str) -> None:
        """Publish one message."""
        ...
