"""
Request Executor
Validates the request options, sends exactly one HTTP request with requests,
and measures how long the whole exchange took.
"""

import logging
import re
import time
from typing import Dict, Optional, Union

import requests

from .errors import TransportError, ValidationError
from .models import Exchange, RequestSpec

logger = logging.getLogger(__name__)

BODYLESS_METHODS = ("GET", "HEAD")
JSON_BODY = re.compile(r"^\s*[{\[]")
LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
CHUNK_SIZE = 8192


def parse_timeout(raw: Union[str, int, None]) -> Optional[int]:
    """Parse a timeout in whole seconds; None means no timeout."""
    if raw is None:
        return None
    if isinstance(raw, int):
        seconds = raw
    else:
        match = LEADING_INT.match(raw)
        if not match:
            raise ValidationError("Timeout must be a positive number")
        seconds = int(match.group(1))
    if seconds <= 0:
        raise ValidationError("Timeout must be a positive number")
    return seconds


def infer_content_type(body: str) -> str:
    return "application/json" if JSON_BODY.match(body) else "text/plain"


def build_request(method: str, url: str, headers: Optional[Dict[str, str]] = None,
                  body: Optional[str] = None,
                  timeout: Union[str, int, None] = None) -> RequestSpec:
    """
    Validate the options and return the request to send.
    Raises ValidationError for a body on GET/HEAD or a bad timeout.
    """
    method = method.upper()
    if body and method in BODYLESS_METHODS:
        raise ValidationError(f"{method} requests cannot include a body")
    timeout_seconds = parse_timeout(timeout)

    headers = dict(headers or {})
    if body and not any(name.lower() == "content-type" for name in headers):
        headers["Content-Type"] = infer_content_type(body)

    return RequestSpec(
        method=method,
        url=url,
        headers=headers,
        body=body,
        timeout_seconds=timeout_seconds,
    )


def read_body(response, deadline: Optional[float] = None) -> bytes:
    """
    Read the streamed body. `deadline` is a perf_counter value; requests only
    bounds each socket read, so the whole exchange is capped here.
    """
    chunks = []
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        chunks.append(chunk)
        if deadline is not None and time.perf_counter() > deadline:
            raise requests.Timeout("Response was not complete within the timeout")
    return b"".join(chunks)


def send_request(spec: RequestSpec, session: Optional[requests.Session] = None) -> Exchange:
    """
    Send the request once and time it, from just before dispatch until the
    body has been read. Any status code counts as a response; only
    transport-level failures raise TransportError.
    """
    own_session = session is None
    if own_session:
        session = requests.Session()

    data = spec.body.encode("utf-8") if spec.body is not None else None
    logger.debug(f"Request: {spec.method} {spec.url} (timeout={spec.timeout_seconds})")

    try:
        start = time.perf_counter()
        deadline = start + spec.timeout_seconds if spec.timeout_seconds else None
        response = session.request(
            spec.method,
            spec.url,
            headers=spec.headers,
            data=data,
            timeout=spec.timeout_seconds,
            stream=True,
        )
        try:
            content = read_body(response, deadline)
        finally:
            response.close()
        elapsed_ms = (time.perf_counter() - start) * 1000
    except requests.RequestException as e:
        logger.error(f"Request failed: {spec.method} {spec.url} - {e}")
        raise TransportError(f"Failed to fetch URL: {e}") from e
    finally:
        if own_session:
            session.close()

    body = "" if spec.is_head else content.decode("utf-8", errors="replace")
    logger.info(f"Response: {response.status_code} in {elapsed_ms:.2f}ms, {len(content)} bytes")

    return Exchange(status_code=response.status_code, body=body, elapsed_ms=elapsed_ms)
