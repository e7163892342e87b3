# Copyright 2025 Loopper-AI
# Lambda handler: SNS (CloudFormation custom resource) → notify management endpoint
#
# CloudFormation publishes Create/Update/Delete requests to the SNS topic.
# Create → PUT, Delete → POST to ResourceProperties.NotificationUrl.
# Update and anything else is acknowledged without a request.
#
# Acknowledgment to CloudFormation:
#   200  → SUCCESS
#   else → FAILED (including transport errors, reported as a synthetic 400)

from __future__ import annotations

import logging
from typing import Any

from .clients import CfnResponseClient, HttpClient
from .config import Config
from .models import SUCCESS, ForwardPayload
from .parsers import EventParser
from .services import AlertService

logger = logging.getLogger()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """SNS-backed custom resource → notify endpoint → respond to CloudFormation."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("lambda_handler started request_id=%s", request_id)

    is_valid, err = config.validate()
    if not is_valid:
        logger.error("Configuration error: %s", err)
        raise ValueError(err)

    # Decode errors propagate: without the request there is no ResponseURL to answer
    provisioning_event = EventParser.decode(event)
    responder = CfnResponseClient(timeout=config.request_timeout)

    if not provisioning_event.request_type.requires_notification:
        logger.info("Skipping notification: request_type=%s", provisioning_event.raw_request_type)
        responder.send(provisioning_event, context, SUCCESS, {})
        return {"status": SUCCESS, "notified": False}

    payload = ForwardPayload.from_event(provisioning_event)
    method = provisioning_event.request_type.http_method
    outcome = HttpClient(timeout=config.request_timeout).send_json(
        method,
        provisioning_event.resource_properties.notification_url,
        payload.to_json(),
    )
    logger.info("Forward outcome: method=%s status=%s request_id=%s", method, outcome.status_code, request_id)

    if not outcome.ok and config.alert_topic_arn:
        AlertService(config.alert_topic_arn).publish_failure(provisioning_event, outcome)

    responder.send(provisioning_event, context, outcome.ack_status, {})
    return {"status": outcome.ack_status, "notified": True, "status_code": outcome.status_code}
