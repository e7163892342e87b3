# Copyright 2025 Loopper-AI
# SNS envelope → CloudFormation custom resource request

from __future__ import annotations

import json
import logging
from typing import Any

from ..models import ProvisioningEvent, RequestType, ResourceProperties

logger = logging.getLogger(__name__)


class EventDecodeError(ValueError):
    """The SNS envelope does not carry a usable CloudFormation request."""


def _first_message(envelope: dict[str, Any]) -> str:
    """Return the Sns.Message string of the first record."""
    records = envelope.get("Records") if isinstance(envelope, dict) else None
    if not isinstance(records, list) or not records:
        raise EventDecodeError("Event has no Records")

    sns = records[0].get("Sns") if isinstance(records[0], dict) else None
    message = sns.get("Message") if isinstance(sns, dict) else None
    if not isinstance(message, str):
        raise EventDecodeError("First record has no Sns.Message")
    return message


class EventParser:
    """Parser for SNS-backed CloudFormation custom resource events."""

    @staticmethod
    def decode(envelope: dict[str, Any]) -> ProvisioningEvent:
        """Parse the embedded request. Only the first record is used.

        Raises:
            EventDecodeError: message missing, not JSON, or not a JSON object
        """
        message = _first_message(envelope)

        try:
            request = json.loads(message)
        except json.JSONDecodeError as e:
            raise EventDecodeError(f"Sns.Message is not valid JSON: {e}") from e

        if not isinstance(request, dict):
            raise EventDecodeError("Sns.Message must be a JSON object")

        props = request.get("ResourceProperties") or {}
        if not isinstance(props, dict):
            raise EventDecodeError("ResourceProperties must be a JSON object")

        raw_type = request.get("RequestType")
        event = ProvisioningEvent(
            request_type=RequestType.from_raw(raw_type),
            raw_request_type=str(raw_type) if raw_type is not None else "",
            stack_id=request.get("StackId"),
            resource_properties=ResourceProperties.from_dict(props),
            response_url=request.get("ResponseURL"),
            request_id=request.get("RequestId"),
            logical_resource_id=request.get("LogicalResourceId"),
            physical_resource_id=request.get("PhysicalResourceId"),
        )

        logger.info(
            "Decoded request_type=%s stack_id=%s logical_resource_id=%s",
            event.raw_request_type,
            event.stack_id,
            event.logical_resource_id,
        )
        return event
