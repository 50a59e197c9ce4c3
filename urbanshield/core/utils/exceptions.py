from typing import Any, Dict, Optional


class AuthCoreException(Exception):
    """Base exception for the auth client core"""
    def __init__(self, message: str, details: Dict[str, Any] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class TransportError(AuthCoreException):
    """Exception raised when a submission does not produce a 2xx response

    Carries whatever the transport knows about the failure so the
    diagnostic can be assembled at the submit boundary.
    """
    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        self.status_code = status_code
        self.body = body
        self.cause = cause
        super().__init__(message or "", {
            "status_code": status_code,
            "cause": repr(cause) if cause else None
        })


class MalformedResponseError(AuthCoreException):
    """Exception raised when a response body is not a usable envelope"""
    pass


class ConfigurationException(AuthCoreException):
    """Exception raised for configuration-related errors"""
    def __init__(self, message: str, subtype: str = None):
        self.subtype = subtype
        super().__init__(message, {"subtype": subtype} if subtype else None)
