"""Value types for the auth request/response cycle

Everything here is request-scoped: created for one submission and
discarded when the flow invocation ends.
"""
import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from urbanshield.core.utils.error_types import AuthErrorType


@dataclass(frozen=True)
class LoginCredentials:
    """Credentials submitted by the login screen"""
    email: str
    password: str

    def to_payload(self) -> Dict[str, str]:
        """Convert to the flat form fields sent to the backend"""
        return asdict(self)


@dataclass(frozen=True)
class SignupCredentials:
    """Registration details submitted by the signup screen"""
    name: str
    email: str
    password: str
    phone: str
    role: str

    def to_payload(self) -> Dict[str, str]:
        """Convert to the flat form fields sent to the backend"""
        return asdict(self)


class Destination(Enum):
    """Landing screens reachable after authentication

    OFFICIAL_HOME is the default arm: any role that is not exactly
    'resident' or 'tourist' lands there.
    """
    RESIDENT_HOME = "resident_home"
    TOURIST_HOME = "tourist_home"
    OFFICIAL_HOME = "official_home"


def _opt_string(data: Dict[str, Any], key: str) -> str:
    """Read an optional string field, absent or null reading as empty"""
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status envelope returned by the backend"""
    status: str = ""
    message: str = ""
    user: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponseEnvelope":
        """Build from a decoded JSON object, ignoring unknown fields"""
        user = data.get("user")
        return cls(
            status=_opt_string(data, "status"),
            message=_opt_string(data, "message"),
            user=user if isinstance(user, dict) else None,
        )

    @property
    def is_success(self) -> bool:
        return self.status.lower() == "success"

    @property
    def user_type(self) -> str:
        if self.user is None:
            return ""
        return _opt_string(self.user, "user_type")


class OutcomeType(Enum):
    """Classification of an interpreted response"""
    NAVIGATE = "navigate"
    REJECTED = "rejected"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Outcome:
    """Result of interpreting a response body

    Attributes:
        type: Outcome classification
        destination: Landing screen when type is NAVIGATE
        message: Server message when REJECTED, detail when MALFORMED_RESPONSE
    """
    type: OutcomeType
    destination: Optional[Destination] = None
    message: str = ""

    @classmethod
    def navigate_to(cls, destination: Destination) -> "Outcome":
        return cls(type=OutcomeType.NAVIGATE, destination=destination)

    @classmethod
    def rejected(cls, message: str) -> "Outcome":
        return cls(type=OutcomeType.REJECTED, message=message)

    @classmethod
    def malformed(cls, detail: str) -> "Outcome":
        return cls(type=OutcomeType.MALFORMED_RESPONSE, message=detail)


@dataclass(frozen=True)
class TransportResult:
    """Tagged result of one submission: a response body or a diagnostic"""
    ok: bool
    body: str = ""
    diagnostic: str = ""

    @classmethod
    def success(cls, body: str) -> "TransportResult":
        return cls(ok=True, body=body)

    @classmethod
    def failure(cls, diagnostic: str) -> "TransportResult":
        return cls(ok=False, diagnostic=diagnostic)


@dataclass(frozen=True)
class FlowResult:
    """What a finished flow invocation hands back to the shell

    Attributes:
        destination: Screen to open when the flow navigated
        error_type: Why the flow stayed on the current screen
        notice: Last notice shown to the user, if any
    """
    destination: Optional[Destination] = None
    error_type: Optional[AuthErrorType] = None
    notice: str = ""

    @classmethod
    def navigated(cls, destination: Destination, notice: str = "") -> "FlowResult":
        return cls(destination=destination, notice=notice)

    @classmethod
    def failed(cls, error_type: AuthErrorType, notice: str) -> "FlowResult":
        return cls(error_type=error_type, notice=notice)

    @property
    def navigated_away(self) -> bool:
        return self.destination is not None
