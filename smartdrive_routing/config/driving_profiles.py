"""
Catalog of driving profiles used to rank route alternatives.

The catalog is fixed and read-only; presentation layers look profiles up
by id rather than constructing them.
"""

from enum import Enum
from typing import Dict, List, Tuple

from ..data.models import DrivingProfile, ProfileWeights
from ..exceptions import UnknownProfileError


class ProfileId(Enum):
    """Available driving profiles."""
    FAST = "fast"
    SAFE = "safe"
    SCENIC = "scenic"


PROFILES: Tuple[DrivingProfile, ...] = (
    DrivingProfile(
        id=ProfileId.FAST.value,
        name="Speed_Demon",
        description="Prioritizes shortest ETA above all else.",
        weights=ProfileWeights(eta=10, activity=0, lighting=1)
    ),
    DrivingProfile(
        id=ProfileId.SAFE.value,
        name="Safety_First",
        description="Prefers well-lit routes with populated areas.",
        weights=ProfileWeights(eta=2, activity=5, lighting=10)
    ),
    DrivingProfile(
        id=ProfileId.SCENIC.value,
        name="Explorer",
        description="Loves high activity and scenic routes.",
        weights=ProfileWeights(eta=1, activity=10, lighting=5)
    ),
)

_PROFILES_BY_ID: Dict[str, DrivingProfile] = {p.id: p for p in PROFILES}

DEFAULT_PROFILE_ID = ProfileId.SAFE


def get_profile(profile_id: ProfileId) -> DrivingProfile:
    """Get the catalog entry for a profile id."""
    return _PROFILES_BY_ID[profile_id.value]


def get_profile_from_string(profile_name: str) -> DrivingProfile:
    """
    Get a profile from its string id.

    Args:
        profile_name: Profile id ('fast', 'safe' or 'scenic'), case-insensitive

    Returns:
        The matching catalog profile

    Raises:
        UnknownProfileError: If the id is not in the catalog
    """
    try:
        return get_profile(ProfileId(profile_name.strip().lower()))
    except (ValueError, AttributeError):
        available = list(get_available_profiles().keys())
        raise UnknownProfileError(f"Unknown profile '{profile_name}'. Available: {available}")


def get_available_profiles() -> Dict[str, str]:
    """Map profile ids to their descriptions."""
    return {p.id: p.description for p in PROFILES}


def list_profiles() -> List[DrivingProfile]:
    return list(PROFILES)
