import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from leaderboard.models.dc_models import PlayerProfile


class PlayerProfileManager:
    """Owns the local player identity stored as JSON at `path`.

    Created by whoever launches the game and handed to the code that needs it.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._profile: Optional[PlayerProfile] = None

    @property
    def profile(self) -> PlayerProfile:
        if self._profile is None:
            return self.load_or_create()
        return self._profile

    def load_or_create(self) -> PlayerProfile:
        """Load the saved profile, or generate and save a new one

        Returns:
            PlayerProfile: The profile used to tag submitted scores
        """
        if self.path.exists():
            try:
                self._profile = PlayerProfile.model_validate_json(self.path.read_bytes())
                logging.info(f"Loaded profile ID: {self._profile.id}, Nickname: {self._profile.nickname}")
                return self._profile
            except (OSError, ValidationError) as e:
                logging.error(f"Failed to load profile from {self.path}: {e}")
                logging.info("Creating new profile due to load failure")

        self._profile = PlayerProfile.generate_new()
        self.save(self._profile)
        logging.info(f"Created new profile ID: {self._profile.id}, Nickname: {self._profile.nickname}")
        return self._profile

    def save(self, profile: PlayerProfile) -> None:
        """A failed write is logged, the profile still applies for this run."""
        self._profile = profile
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(profile.model_dump_json(indent=2), encoding="utf-8")
            logging.debug(f"Profile saved to: {self.path}")
        except OSError as e:
            logging.error(f"Failed to save profile to {self.path}: {e}")
