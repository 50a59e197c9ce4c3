"""User-facing notices and fixed choices for the auth flows"""
from enum import Enum

from urbanshield.core.utils.error_types import MISSING_FIELDS, TERMS_NOT_ACCEPTED


class Role(Enum):
    """Roles offered on the signup screen"""
    RESIDENT = "resident"
    TOURIST = "tourist"
    OFFICIAL = "official"


ROLE_CHOICES = [role.value for role in Role]

# Validation notices per flow, keyed by failure reason
LOGIN_VALIDATION_NOTICES = {
    MISSING_FIELDS: "All fields required",
}

SIGNUP_VALIDATION_NOTICES = {
    TERMS_NOT_ACCEPTED: "Accept Terms & Conditions",
    MISSING_FIELDS: "Please fill all fields",
}

SIGNUP_SUCCESS_NOTICE = "Sign Up successful"
INVALID_RESPONSE_NOTICE = "Invalid response from server"
PARSE_ERROR_PREFIX = "Parse error: "

# Fixed labels placed in front of transport diagnostics
LOGIN_TRANSPORT_LABEL = "Network Error: "
SIGNUP_TRANSPORT_LABEL = "Error: "

# Signup shows server rejections behind this label, login shows them bare
SIGNUP_REJECTION_LABEL = "Error: "
