# Copyright 2025 Loopper-AI
# Configuration management for the notification relay

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    log_level: str = "INFO"
    request_timeout: float | None = None
    alert_topic_arn: str | None = None

    @classmethod
    def from_environment(cls) -> Config:
        """Load config. REQUEST_TIMEOUT unset means the transport default applies."""
        raw_timeout = (os.environ.get("REQUEST_TIMEOUT") or "").strip()
        alert_topic_arn = (os.environ.get("ALERT_TOPIC_ARN") or "").strip() or None

        return cls(
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            request_timeout=float(raw_timeout) if raw_timeout else None,
            alert_topic_arn=alert_topic_arn,
        )

    def validate(self) -> tuple[bool, str | None]:
        if self.request_timeout is not None and self.request_timeout <= 0:
            return False, "REQUEST_TIMEOUT must be positive"
        if self.alert_topic_arn and not self.alert_topic_arn.startswith("arn:aws:sns:"):
            return False, "ALERT_TOPIC_ARN must be an SNS topic ARN"
        return True, None
