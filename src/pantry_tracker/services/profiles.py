"""User profile and data reset actions."""

import logging
from dataclasses import dataclass

from pantry_tracker.domain.inventory import DEFAULT_PROFILE, UserProfile
from pantry_tracker.services.records import parse_profile, profile_to_row
from pantry_tracker.services.storage import (
    PROFILE_KEY,
    KeyValueStorage,
    consumptions_key,
    daily_statuses_key,
    ingredients_key,
)

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Application service for the profile that scopes all collections."""

    storage: KeyValueStorage

    def current_profile(self) -> UserProfile:
        """Return the stored profile, or the default one."""
        row = self.storage.get(PROFILE_KEY, None)
        if not isinstance(row, dict):
            return DEFAULT_PROFILE
        return parse_profile(row)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Persist the profile and return it."""
        self.storage.set(PROFILE_KEY, profile_to_row(profile))
        return profile

    def clear_user_data(self, user_id: str) -> None:
        """Empty every collection owned by the user."""
        for key in (
            ingredients_key(user_id),
            consumptions_key(user_id),
            daily_statuses_key(user_id),
        ):
            self.storage.set(key, [])
        _logger.info("Cleared inventory data for user=%s", user_id)
