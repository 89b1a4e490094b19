"""SNS implementation of MessagePublisher for the status topic."""

import boto3


class SNSStatusPublisher:
    """MessagePublisher implementation publishing to one SNS topic."""

    def __init__(
        self,
        topic_arn: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._topic_arn = topic_arn
        self._client = boto3.client(
            "sns",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def publish(self, message: str) -> None:
        """Publish one message to the topic."""
        self._client.publish(TopicArn=self._topic_arn, Message=message)
