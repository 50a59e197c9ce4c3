"""Login and signup flow implementation"""
import logging
from typing import Dict, Optional

from urbanshield.core.api.interpreter import (interpret_login_response,
                                              interpret_signup_response)
from urbanshield.core.api.models import (Destination, FlowResult, Outcome,
                                         OutcomeType, TransportResult)
from urbanshield.core.api.payload import (build_login_credentials,
                                          build_signup_credentials)
from urbanshield.core.api.transport import submit
from urbanshield.core.api.validator import validate_login, validate_signup
from urbanshield.core.config.constants import (INVALID_RESPONSE_NOTICE,
                                               LOGIN_TRANSPORT_LABEL,
                                               LOGIN_VALIDATION_NOTICES,
                                               PARSE_ERROR_PREFIX,
                                               SIGNUP_REJECTION_LABEL,
                                               SIGNUP_SUCCESS_NOTICE,
                                               SIGNUP_TRANSPORT_LABEL,
                                               SIGNUP_VALIDATION_NOTICES)
from urbanshield.core.config.settings import AuthSettings
from urbanshield.core.utils.audit_logging import log_auth_event
from urbanshield.core.utils.error_types import (NO_USER_OBJECT, AuthErrorType,
                                                ValidationResult)

from .interface import AuthScreen

logger = logging.getLogger(__name__)


class AuthFlow:
    """Shared steps of a single login or signup attempt

    Each call to submit owns its payload and response; nothing is kept on
    the instance between calls, so overlapping submissions are independent.
    """

    name = ""
    action = ""
    validation_notices: Dict[str, str] = {}
    transport_label = ""

    def __init__(self, screen: AuthScreen, settings: Optional[AuthSettings] = None):
        self.screen = screen
        self.settings = settings or AuthSettings.from_env()

    @property
    def endpoint(self) -> str:
        return self.settings.get_url("auth", self.action)

    def _fail(self, error_type: AuthErrorType, notice: str) -> FlowResult:
        self.screen.show_notice(notice)
        return FlowResult.failed(error_type, notice)

    def _reject_input(self, validation: ValidationResult) -> FlowResult:
        logger.info(f"{self.name.capitalize()} input rejected: {validation.reason}")
        return self._fail(AuthErrorType.VALIDATION, self.validation_notices[validation.reason])

    async def _send(self, payload: Dict[str, str]) -> TransportResult:
        log_auth_event("pre_submit", self.name, "pending", payload)
        return await submit(self.endpoint, payload)

    def _transport_failed(self, result: TransportResult) -> FlowResult:
        log_auth_event("error", self.name, "failure", {"diagnostic": result.diagnostic})
        return self._fail(AuthErrorType.TRANSPORT, self.transport_label + result.diagnostic)

    def _malformed_notice(self, outcome: Outcome) -> str:
        if outcome.message == NO_USER_OBJECT:
            return INVALID_RESPONSE_NOTICE
        return PARSE_ERROR_PREFIX + outcome.message

    def _rejection_notice(self, outcome: Outcome) -> str:
        return outcome.message

    def _navigate(self, destination: Destination) -> FlowResult:
        self.screen.navigate_to(destination)
        return FlowResult.navigated(destination)

    def _apply(self, outcome: Outcome) -> FlowResult:
        """Apply an interpreted outcome to the screen"""
        log_auth_event(
            "post_response",
            self.name,
            "success" if outcome.type == OutcomeType.NAVIGATE else "failure",
            {"outcome": outcome.type.value}
        )

        if outcome.type == OutcomeType.NAVIGATE:
            logger.info(f"{self.name.capitalize()} successful, routing to {outcome.destination.value}")
            return self._navigate(outcome.destination)

        if outcome.type == OutcomeType.REJECTED:
            logger.warning(f"{self.name.capitalize()} failed -> {outcome.message}")
            return self._fail(AuthErrorType.BUSINESS_REJECTION, self._rejection_notice(outcome))

        return self._fail(AuthErrorType.MALFORMED_RESPONSE, self._malformed_notice(outcome))


class LoginFlow(AuthFlow):
    """Email and password login"""

    name = "login"
    action = "login"
    validation_notices = LOGIN_VALIDATION_NOTICES
    transport_label = LOGIN_TRANSPORT_LABEL

    async def submit(self, email: str, password: str) -> FlowResult:
        """Run one login attempt

        Returns:
            FlowResult: destination when the user is routed onward,
            otherwise the error type and the notice shown
        """
        validation = validate_login(email, password)
        if not validation:
            return self._reject_input(validation)

        credentials = build_login_credentials(validation.value)
        result = await self._send(credentials.to_payload())
        if not result.ok:
            return self._transport_failed(result)

        return self._apply(interpret_login_response(result.body))


class SignupFlow(AuthFlow):
    """Account registration with a locally selected role"""

    name = "signup"
    action = "register"
    validation_notices = SIGNUP_VALIDATION_NOTICES
    transport_label = SIGNUP_TRANSPORT_LABEL

    def _rejection_notice(self, outcome: Outcome) -> str:
        return SIGNUP_REJECTION_LABEL + outcome.message

    def _navigate(self, destination: Destination) -> FlowResult:
        self.screen.show_notice(SIGNUP_SUCCESS_NOTICE)
        self.screen.navigate_to(destination)
        return FlowResult.navigated(destination, SIGNUP_SUCCESS_NOTICE)

    async def submit(
        self,
        name: str,
        email: str,
        password: str,
        phone: str,
        role: str,
        accepted_terms: bool
    ) -> FlowResult:
        """Run one signup attempt

        The destination is taken from the role chosen here, not from
        anything the server returns.
        """
        validation = validate_signup(name, email, password, phone, role, accepted_terms)
        if not validation:
            return self._reject_input(validation)

        credentials = build_signup_credentials(validation.value)
        result = await self._send(credentials.to_payload())
        if not result.ok:
            return self._transport_failed(result)

        return self._apply(interpret_signup_response(result.body, credentials.role))
