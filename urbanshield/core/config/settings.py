"""Auth backend configuration using environment variables"""
from dataclasses import dataclass
from urllib.parse import urljoin

from decouple import config

from urbanshield.core.utils.exceptions import ConfigurationException

DEFAULT_API_URL = "http://192.168.0.100/urbanshield/"


@dataclass
class AuthSettings:
    """Configuration for UrbanShield backend access"""
    base_url: str

    @classmethod
    def from_env(cls) -> "AuthSettings":
        """Create configuration from environment variables"""
        base_url = config("URBANSHIELD_API_URL", default=DEFAULT_API_URL)
        if not base_url:
            raise ConfigurationException(
                "URBANSHIELD_API_URL environment variable is empty",
                "missing"
            )

        return cls.from_url(base_url)

    @classmethod
    def from_url(cls, base_url: str) -> "AuthSettings":
        """Create configuration for an explicit backend URL"""
        # urljoin drops the last path segment unless the base ends with a slash
        if not base_url.endswith("/"):
            base_url += "/"
        return cls(base_url=base_url)

    def get_url(self, group: str, action: str) -> str:
        """Get full URL for an endpoint"""
        return urljoin(self.base_url, AuthEndpoints.get_path(group, action))


class AuthEndpoints:
    """UrbanShield API endpoint definitions"""

    ENDPOINTS = {
        'auth': {
            'login': {'path': 'api/login.php'},
            'register': {'path': 'api/register.php'}
        }
    }

    @classmethod
    def get_path(cls, group: str, action: str) -> str:
        """Get endpoint path"""
        if not group or not action:
            raise ConfigurationException(
                "Group and action are required",
                "validation"
            )

        if group not in cls.ENDPOINTS:
            raise ConfigurationException(
                f"Invalid endpoint group: {group}",
                "validation"
            )
        if action not in cls.ENDPOINTS[group]:
            raise ConfigurationException(
                f"Invalid action '{action}' for group '{group}'",
                "validation"
            )

        return cls.ENDPOINTS[group][action]['path']
