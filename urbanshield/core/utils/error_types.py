"""Error type definitions and result structures

Failures in the auth flows are reported as values rather than raised:
validation produces a ValidationResult, and a finished flow reports one
of the AuthErrorType members when it did not navigate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass
class ValidationResult:
    """Result of input validation

    Attributes:
        valid: Whether validation passed
        reason: Short machine-readable reason if validation failed
        value: Trimmed field values if validation passed
    """
    valid: bool
    reason: Optional[str] = None
    value: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, value: Dict[str, Any]) -> 'ValidationResult':
        """Create successful validation result"""
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> 'ValidationResult':
        """Create failed validation result"""
        return cls(valid=False, reason=reason)

    def __bool__(self):
        return self.valid


class AuthErrorType(Enum):
    """Ways a flow can end without navigating"""
    VALIDATION = "validation"                  # Recovered locally, no request sent
    TRANSPORT = "transport"                    # No 2xx response from the backend
    MALFORMED_RESPONSE = "malformed_response"  # Body is not a usable envelope
    BUSINESS_REJECTION = "business_rejection"  # Backend reported non-success


# Validation failure reasons
MISSING_FIELDS = "missing fields"
TERMS_NOT_ACCEPTED = "terms not accepted"

# Interpreter detail for a success envelope without a user object
NO_USER_OBJECT = "no user object"
