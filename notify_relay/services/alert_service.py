# Copyright 2025 Loopper-AI
# SNS ops alert service

from __future__ import annotations

import json
import logging

import boto3
from botocore.exceptions import ClientError

from ..models import OutcomeResult, ProvisioningEvent

logger = logging.getLogger(__name__)

# SNS subject limit
MAX_SUBJECT_LENGTH = 100


class AlertService:
    """Publishes failed stack notifications to an ops SNS topic."""

    def __init__(self, topic_arn: str):
        self.topic_arn = topic_arn
        self._client = None

    def _sns(self):
        if self._client is None:
            self._client = boto3.client("sns")
        return self._client

    def publish_failure(self, event: ProvisioningEvent, outcome: OutcomeResult) -> str | None:
        """Publish a failure alert. Returns MessageId or None on failure."""
        message = {
            "request_type": event.request_type.value,
            "stack_id": event.stack_id,
            "account_id": event.resource_properties.account_id,
            "notification_url": event.resource_properties.notification_url,
            "status_code": outcome.status_code,
            "body": outcome.body[:500],
        }
        subject = f"Stack notification failed: {event.request_type.value} {outcome.status_code}"

        try:
            response = self._sns().publish(
                TopicArn=self.topic_arn,
                Subject=subject[:MAX_SUBJECT_LENGTH],
                Message=json.dumps(message, default=str),
            )
            msg_id = response.get("MessageId")
            logger.info("SNS alert sent: message_id=%s stack_id=%s", msg_id, event.stack_id)
            return msg_id

        except ClientError as e:
            logger.error("SNS error [%s]: %s", e.response.get("Error", {}).get("Code"), e)
            return None
        except Exception as e:
            logger.exception("SNS unexpected error: %s", e)
            return None
