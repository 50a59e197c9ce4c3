"""Auth API components: validation, payloads, transport, interpretation, routing"""
from .interpreter import (interpret, interpret_login_response,
                          interpret_signup_response, parse_envelope)
from .models import (Destination, FlowResult, LoginCredentials, Outcome,
                     OutcomeType, ResponseEnvelope, SignupCredentials,
                     TransportResult)
from .payload import build_login_credentials, build_signup_credentials
from .router import route
from .transport import describe_transport_failure, submit
from .validator import validate_login, validate_signup

__all__ = [
    # Components
    'validate_login',
    'validate_signup',
    'build_login_credentials',
    'build_signup_credentials',
    'submit',
    'describe_transport_failure',
    'parse_envelope',
    'interpret',
    'interpret_login_response',
    'interpret_signup_response',
    'route',

    # Types
    'Destination',
    'FlowResult',
    'LoginCredentials',
    'Outcome',
    'OutcomeType',
    'ResponseEnvelope',
    'SignupCredentials',
    'TransportResult',
]
