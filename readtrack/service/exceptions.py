from __future__ import annotations


class AchievementServiceError(Exception):
    """Raised when the achievement catalog or a user's unlocks cannot be loaded."""

    def __init__(self, message: str, user_id: str | None = None):
        super().__init__(message)
        self.user_id = user_id
