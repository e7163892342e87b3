# Copyright 2025 Loopper-AI
# Data models for the notification relay

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

AckStatus = Literal["SUCCESS", "FAILED"]

SUCCESS: AckStatus = "SUCCESS"
FAILED: AckStatus = "FAILED"

HTTP_OK = 200


class RequestType(Enum):
    """CloudFormation lifecycle action, decided once at decode time."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    OTHER = "Other"

    @classmethod
    def from_raw(cls, raw: Any) -> RequestType:
        if not isinstance(raw, str):
            return cls.OTHER
        normalized = raw.strip().lower()
        for member in (cls.CREATE, cls.UPDATE, cls.DELETE):
            if member.value.lower() == normalized:
                return member
        return cls.OTHER

    @property
    def requires_notification(self) -> bool:
        return self in (RequestType.CREATE, RequestType.DELETE)

    @property
    def http_method(self) -> str:
        return "POST" if self is RequestType.DELETE else "PUT"


@dataclass(frozen=True)
class ResourceProperties:
    """Custom resource properties the relay reads. Anything else is ignored."""

    notification_url: str | None = None
    role_arn: str | None = None
    external_id: str | None = None
    account_id: str | None = None
    cur_path: str | None = None
    s3_bucket: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ResourceProperties:
        return cls(
            notification_url=raw.get("NotificationUrl"),
            role_arn=raw.get("RoleArn"),
            external_id=raw.get("ExternalID"),
            account_id=raw.get("AccountID"),
            cur_path=raw.get("CurPath"),
            s3_bucket=raw.get("S3Bucket"),
        )


@dataclass(frozen=True)
class ProvisioningEvent:
    """CloudFormation custom resource request carried inside the SNS message."""

    request_type: RequestType
    raw_request_type: str
    stack_id: str | None
    resource_properties: ResourceProperties
    response_url: str | None = None
    request_id: str | None = None
    logical_resource_id: str | None = None
    physical_resource_id: str | None = None


@dataclass(frozen=True)
class ForwardPayload:
    """Body sent to the management endpoint."""

    stack_id: str | None
    management_arn: str | None
    external_id: str | None
    account_id: str | None
    cur_path: str | None
    s3_bucket: str | None

    @classmethod
    def from_event(cls, event: ProvisioningEvent) -> ForwardPayload:
        props = event.resource_properties
        return cls(
            stack_id=event.stack_id,
            management_arn=props.role_arn,
            external_id=props.external_id,
            account_id=props.account_id,
            cur_path=props.cur_path,
            s3_bucket=props.s3_bucket,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "stack_id": self.stack_id,
            "management_arn": self.management_arn,
            "external_id": self.external_id,
            "account_id": self.account_id,
            "cur_path": self.cur_path,
            "s3_bucket": self.s3_bucket,
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")


@dataclass(frozen=True)
class OutcomeResult:
    """Status and body of the forward request, real or synthetic."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == HTTP_OK

    @property
    def ack_status(self) -> AckStatus:
        return SUCCESS if self.ok else FAILED


@dataclass
class CfnResponse:
    """Response document CloudFormation expects at the pre-signed ResponseURL."""

    status: AckStatus
    reason: str
    physical_resource_id: str
    stack_id: str | None
    request_id: str | None
    logical_resource_id: str | None
    no_echo: bool = False
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Status": self.status,
            "Reason": self.reason,
            "PhysicalResourceId": self.physical_resource_id,
            "StackId": self.stack_id,
            "RequestId": self.request_id,
            "LogicalResourceId": self.logical_resource_id,
            "NoEcho": self.no_echo,
            "Data": self.data,
        }
