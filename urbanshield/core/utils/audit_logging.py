"""Audit logging for authentication events

Flows report what they are doing at three points: before a submission,
after a response arrives and when a submission fails. Secret material is
redacted before anything reaches the logger.
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("urbanshield.audit")

# Keys whose values must never be written to a log record
SECRET_FIELDS = frozenset({"password"})

REDACTED = "***"


def redact(details: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of details with secret values masked"""
    if not details:
        return {}
    return {
        key: REDACTED if key in SECRET_FIELDS else value
        for key, value in details.items()
    }


def log_auth_event(
    event_type: str,
    flow: str,
    status: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Log an authentication event

    Args:
        event_type: Point in the flow (e.g. 'pre_submit', 'post_response', 'error')
        flow: Flow name ('login' or 'signup')
        status: Status of the event (e.g. 'pending', 'success', 'failure')
        details: Additional details, redacted before logging
    """
    message = f"Auth event: {event_type} - Flow: {flow} - Status: {status}"
    safe_details = redact(details)
    if safe_details:
        message += f" - Details: {safe_details}"

    if status == "failure":
        logger.warning(message)
    else:
        logger.info(message)
