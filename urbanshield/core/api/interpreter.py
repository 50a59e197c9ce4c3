"""Response interpretation for login and signup submissions

Turns a raw response body into an Outcome. Never raises: anything that
cannot be read as a status envelope becomes a MALFORMED_RESPONSE outcome.
"""
import json
import logging
from typing import Optional

from urbanshield.core.utils.error_types import NO_USER_OBJECT
from urbanshield.core.utils.exceptions import MalformedResponseError

from .models import Outcome, ResponseEnvelope
from .router import route

logger = logging.getLogger(__name__)

LOGIN = "login"
SIGNUP = "signup"


def parse_envelope(raw_body: str) -> ResponseEnvelope:
    """Parse a response body into a ResponseEnvelope

    Raises:
        MalformedResponseError: If the body is not a JSON object
    """
    try:
        data = json.loads(raw_body)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedResponseError(str(e), {"body_length": len(raw_body or "")}) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    return ResponseEnvelope.from_dict(data)


def interpret(raw_body: str, local_role: Optional[str] = None, flow: str = LOGIN) -> Outcome:
    """Classify a response body

    Args:
        raw_body: Response body as received
        local_role: Role selected on the signup screen; ignored for login
        flow: 'login' or 'signup'

    Returns:
        Outcome: NAVIGATE with the routed destination, REJECTED with the
        server message, or MALFORMED_RESPONSE with a detail string
    """
    try:
        envelope = parse_envelope(raw_body)
    except MalformedResponseError as e:
        logger.error(f"Unparseable {flow} response: {e.message}")
        return Outcome.malformed(e.message)

    logger.debug(f"Parsed {flow} response -> status: {envelope.status}")

    if not envelope.is_success:
        logger.info(f"{flow.capitalize()} rejected by server")
        return Outcome.rejected(envelope.message)

    if flow == SIGNUP:
        # Role comes from the signup screen, never from the server
        return Outcome.navigate_to(route(local_role))

    if envelope.user is None:
        logger.error("Login success response has no 'user' object")
        return Outcome.malformed(NO_USER_OBJECT)

    return Outcome.navigate_to(route(envelope.user_type))


def interpret_login_response(raw_body: str) -> Outcome:
    return interpret(raw_body, flow=LOGIN)


def interpret_signup_response(raw_body: str, local_role: str) -> Outcome:
    return interpret(raw_body, local_role=local_role, flow=SIGNUP)
