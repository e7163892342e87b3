# Copyright 2025 Loopper-AI
# HTTP client for notifying the management endpoint

from __future__ import annotations

import http.client
import logging
import ssl
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from ..models import OutcomeResult

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_STATUS = 400
TRANSPORT_ERROR_BODY = "error"


def _transport_error() -> OutcomeResult:
    return OutcomeResult(status_code=TRANSPORT_ERROR_STATUS, body=TRANSPORT_ERROR_BODY)


class HttpClient:
    """HTTP client for sending JSON payloads to the management endpoint."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self._ssl_ctx = ssl.create_default_context()

    def send_json(self, method: str, url: str | None, payload: bytes) -> OutcomeResult:
        """Send one JSON request. Returns OutcomeResult, never raises.

        urllib raises HTTPError for non-2xx status codes. Those are still real
        responses, so their status and body become the outcome. Anything that
        prevents a response (bad URL, DNS, refused connection, timeout) yields
        the synthetic 400 outcome.
        """
        parts = urlsplit(url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            logger.error("Unusable notification URL: %r", url)
            return _transport_error()

        target = urlunsplit((parts.scheme, parts.netloc, parts.path or "/", parts.query, ""))
        req = urllib.request.Request(
            target,
            data=payload,
            headers={"Content-Type": "application/json"},
            method=method,
        )
        logger.info("Sending %s host=%s path=%s", method, parts.netloc, parts.path or "/")

        kwargs: dict[str, Any] = {"context": self._ssl_ctx}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            with urllib.request.urlopen(req, **kwargs) as resp:
                code = resp.getcode()
                body = resp.read().decode("utf-8", errors="replace")

        except urllib.error.HTTPError as exc:
            try:
                err_body = exc.read().decode("utf-8", errors="replace")
            except (http.client.HTTPException, OSError) as read_exc:
                logger.warning("HTTPError body unreadable: code=%s error=%s", exc.code, read_exc)
                err_body = ""
            logger.warning("HTTPError: code=%s body=%s", exc.code, err_body[:500])
            return OutcomeResult(status_code=exc.code, body=err_body)

        except urllib.error.URLError as exc:
            logger.error("URLError: reason=%s", exc.reason)
            return _transport_error()

        except (http.client.HTTPException, OSError, ValueError) as exc:
            logger.error("Transport error: %s", exc)
            return _transport_error()

        except Exception as exc:
            logger.exception("Unexpected HTTP error: %s", exc)
            return _transport_error()

        logger.info("Response complete: status=%s body=%s", code, body[:500])
        return OutcomeResult(status_code=code, body=body)
