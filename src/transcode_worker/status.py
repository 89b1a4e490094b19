"""
Status reporter: publish one status event per call to the status topic.

Payload is JSON {bucket, key, status, detail}; detail is omitted for
PROCESSING, a diagnostic string for ERROR and {resultKey, durationSeconds}
for COMPLETE. Publish failures are logged and re-raised as NotificationError;
nothing is retried here.
"""

import logging
from typing import Any

from .errors import NotificationError
from .interfaces import MessagePublisher
from .models import ProcessingStatus, StatusEventUnion, build_status_event

logger = logging.getLogger(__name__)


def report_status(
    publisher: MessagePublisher,
    bucket: str,
    key: str,
    status: ProcessingStatus | str,
    detail: Any = None,
) -> StatusEventUnion:
    """Build, serialize and publish one status event. Returns the event sent."""
    event = build_status_event(bucket, key, status, detail)
    message = event.to_message()
    logger.info("reporting status update %s", message)
    try:
        publisher.publish(message)
    except Exception as e:
        logger.exception("error reporting status update (status=%s key=%s)", event.status, key)
        raise NotificationError(
            f"error publishing {event.status} status for s3://{bucket}/{key}: {e}"
        ) from e
    logger.info("reported status=%s key=%s", event.status, key)
    return event
