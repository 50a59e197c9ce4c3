"""Auth Service Package

Login and signup flows that wire validation, submission, interpretation
and routing together for a screen.
"""

from .flows import LoginFlow, SignupFlow
from .interface import AuthScreen

__all__ = [
    'AuthScreen',
    'LoginFlow',
    'SignupFlow',
]
