# Copyright 2025 Loopper-AI
# Parser modules for SNS-delivered CloudFormation requests

from .event_parser import EventDecodeError, EventParser

__all__ = ["EventParser", "EventDecodeError"]
