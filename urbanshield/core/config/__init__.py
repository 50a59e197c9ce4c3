"""Core configuration

Backend location, endpoint paths, user-facing notices and logging setup.
"""

from .settings import AuthEndpoints, AuthSettings
from .logging_config import LOGGING, configure_logging

__all__ = [
    'AuthEndpoints',
    'AuthSettings',
    'LOGGING',
    'configure_logging',
]
