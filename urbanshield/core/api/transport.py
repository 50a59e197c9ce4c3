"""Form-encoded submission to the auth backend

The blocking requests call runs in a worker thread so the awaiting flow
only suspends at this point. Each submission gets its own Session.
"""
import asyncio
import logging
from typing import Mapping, Optional

import requests

from urbanshield.core.utils.exceptions import TransportError

from .models import TransportResult

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


def describe_transport_failure(
    status_code: Optional[int] = None,
    body: Optional[str] = None,
    cause: Optional[BaseException] = None,
    message: Optional[str] = None
) -> str:
    """Build the user-facing diagnostic for a failed submission

    Precedence: server status and body, then the underlying cause, then
    the bare message, then a fixed fallback.
    """
    if status_code is not None:
        return f"Code: {status_code} | Response: {body or ''}"
    if cause is not None:
        cause_text = str(cause)
        name = type(cause).__name__
        return f"Cause: {name}: {cause_text}" if cause_text else f"Cause: {name}"
    if message:
        return message
    return UNKNOWN_ERROR


def _find_cause(error: requests.exceptions.RequestException) -> Optional[BaseException]:
    """Locate the exception a requests error wraps, if any"""
    if error.__cause__ is not None:
        return error.__cause__
    if error.args and isinstance(error.args[0], BaseException):
        return error.args[0]
    return error.__context__


def _post_form(endpoint: str, payload: Mapping[str, str]) -> str:
    """POST the payload form-encoded and return the body of a 2xx response

    Raises:
        TransportError: On connection failure or a non-2xx response
    """
    with requests.Session() as session:
        try:
            response = session.post(endpoint, data=dict(payload))
        except requests.exceptions.RequestException as e:
            raise TransportError(message=str(e), cause=_find_cause(e)) from e

    logger.info(f"Response from {endpoint}: status {response.status_code}")

    if not 200 <= response.status_code < 300:
        raise TransportError(
            message=f"Request failed: {response.status_code}",
            status_code=response.status_code,
            body=response.text
        )

    return response.text


async def submit(endpoint: str, payload: Mapping[str, str]) -> TransportResult:
    """Submit a credential payload and wait for the outcome

    Args:
        endpoint: Absolute URL to POST to
        payload: Flat field map, sent as the form body

    Returns:
        TransportResult: The raw body on a 2xx response, otherwise the
        diagnostic string describing the failure
    """
    # Field names only; values can hold credentials
    logger.info(f"Submitting to {endpoint} with fields: {sorted(payload)}")

    try:
        body = await asyncio.to_thread(_post_form, endpoint, payload)
    except TransportError as e:
        diagnostic = describe_transport_failure(
            status_code=e.status_code,
            body=e.body,
            cause=e.cause,
            message=e.message
        )
        logger.error(f"Submission to {endpoint} failed: {diagnostic}")
        return TransportResult.failure(diagnostic)

    return TransportResult.success(body)
