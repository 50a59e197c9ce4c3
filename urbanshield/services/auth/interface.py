from abc import ABC, abstractmethod

from urbanshield.core.api.models import Destination


class AuthScreen(ABC):
    """Presentation and navigation boundary used by the auth flows"""

    @abstractmethod
    def show_notice(self, message: str) -> None:
        """Show a short human-readable status message

        Args:
            message: Notice text, shown as-is
        """
        pass

    @abstractmethod
    def navigate_to(self, destination: Destination) -> None:
        """Open the landing screen and close the current one

        Args:
            destination: Screen selected from the user's role
        """
        pass
