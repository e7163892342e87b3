# Copyright 2025 Loopper-AI
# Client modules for external services

from .cfn_response_client import AcknowledgmentError, CfnResponseClient
from .http_client import HttpClient

__all__ = ["HttpClient", "CfnResponseClient", "AcknowledgmentError"]
