# Copyright 2025 Loopper-AI
# CloudFormation custom resource response client

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from ..models import AckStatus, CfnResponse, ProvisioningEvent

logger = logging.getLogger(__name__)


class AcknowledgmentError(RuntimeError):
    """The SUCCESS/FAILED response could not be delivered to CloudFormation."""


class CfnResponseClient:
    """Sends the custom resource result to the pre-signed ResponseURL."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def send(
        self,
        event: ProvisioningEvent,
        context: Any,
        status: AckStatus,
        data: dict[str, Any] | None = None,
    ) -> int:
        """PUT the response document. Returns the HTTP status.

        Raises:
            AcknowledgmentError: missing ResponseURL or the PUT failed
        """
        if not event.response_url:
            raise AcknowledgmentError("Event has no ResponseURL")

        log_stream = getattr(context, "log_stream_name", "") if context else ""
        physical_id = event.physical_resource_id or log_stream or event.logical_resource_id or event.request_id or ""
        response = CfnResponse(
            status=status,
            reason=f"See the details in CloudWatch Log Stream: {log_stream}",
            physical_resource_id=physical_id,
            stack_id=event.stack_id,
            request_id=event.request_id,
            logical_resource_id=event.logical_resource_id,
            data=dict(data or {}),
        )
        body = json.dumps(response.to_dict()).encode("utf-8")

        # Pre-signed S3 URLs reject any Content-Type other than empty
        req = urllib.request.Request(
            event.response_url,
            data=body,
            headers={"Content-Type": ""},
            method="PUT",
        )
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            with urllib.request.urlopen(req, **kwargs) as resp:
                code = resp.getcode()
        except urllib.error.HTTPError as exc:
            logger.error("Acknowledgment rejected: code=%s", exc.code)
            raise AcknowledgmentError(f"HTTPError {exc.code}") from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
            logger.error("Acknowledgment failed: %s", exc)
            raise AcknowledgmentError(str(exc)) from exc

        logger.info("Acknowledged status=%s request_id=%s code=%s", status, event.request_id, code)
        return code
