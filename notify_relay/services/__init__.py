# Copyright 2025 Loopper-AI
# Service modules

from .alert_service import AlertService

__all__ = ["AlertService"]
