"""Role to landing screen routing"""
from typing import Dict, Optional

from .models import Destination

ROLE_DESTINATIONS: Dict[str, Destination] = {
    "resident": Destination.RESIDENT_HOME,
    "tourist": Destination.TOURIST_HOME,
}

# Catch-all for every role not listed above, including blanks and typos
DEFAULT_DESTINATION = Destination.OFFICIAL_HOME


def route(role_or_user_type: Optional[str]) -> Destination:
    """Map a role or user_type to its landing screen

    Matching is exact and case-sensitive; 'Resident' goes to the default.
    """
    return ROLE_DESTINATIONS.get(role_or_user_type or "", DEFAULT_DESTINATION)
