"""Achievement persistence: calculator computes, storage remembers."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

from botocore.exceptions import BotoCoreError, ClientError

from readtrack.engine.achievements import AchievementCalculator
from readtrack.engine.deadlines import latest_status
from readtrack.models.achievement import (
    AchievementDefinition,
    AchievementProgress,
    AchievementProgressRecord,
    AchievementWithStatus,
    CalculatorContext,
    UserAchievement,
)
from readtrack.models.deadline import Deadline
from readtrack.models.enums import DeadlineStatus
from readtrack.service.exceptions import AchievementServiceError
from readtrack.storage.base import StorageBackend

logger = logging.getLogger(__name__)

_STORAGE_ERRORS = (ClientError, BotoCoreError)


def split_by_status(deadlines: list[Deadline]) -> tuple[list[Deadline], list[Deadline]]:
    """(active, completed) by each deadline's latest status. Set-aside ones are in neither."""
    active: list[Deadline] = []
    completed: list[Deadline] = []
    for deadline in deadlines:
        status = latest_status(deadline)
        if status == DeadlineStatus.COMPLETE:
            completed.append(deadline)
        elif status in (None, DeadlineStatus.READING):
            active.append(deadline)
    return active, completed


class AchievementService:
    def __init__(
        self,
        storage: StorageBackend,
        user_id: str,
        deadlines: list[Deadline],
        today: date | None = None,
    ):
        self.storage = storage
        self.user_id = user_id
        active, completed = split_by_status(deadlines)
        self.calculator = AchievementCalculator(
            CalculatorContext(
                deadlines=active,
                completed_deadlines=completed,
                user_id=user_id,
                today=today or datetime.now(UTC).date(),
            )
        )

    def _load(self) -> tuple[list[AchievementDefinition], dict[str, UserAchievement]]:
        try:
            achievements = self.storage.get_active_achievements()
            unlocked = self.storage.get_user_achievements(self.user_id)
        except _STORAGE_ERRORS as e:
            raise AchievementServiceError(
                f"Could not load achievements for user {self.user_id}: {e}",
                user_id=self.user_id,
            ) from e
        return achievements, {ua.achievement_id: ua for ua in unlocked}

    def get_achievements_with_status(self) -> list[AchievementWithStatus]:
        achievements, unlocked = self._load()
        results: list[AchievementWithStatus] = []
        for achievement in achievements:
            user_achievement = unlocked.get(achievement.id)
            results.append(
                AchievementWithStatus(
                    definition=achievement,
                    is_unlocked=user_achievement is not None,
                    progress=self.calculator.calculate_progress(achievement),
                    unlocked_at=user_achievement.unlocked_at if user_achievement else None,
                )
            )
        return results

    def _progress_record(
        self, achievement: AchievementDefinition, progress: AchievementProgress, **extra
    ) -> AchievementProgressRecord:
        return AchievementProgressRecord(
            user_id=self.user_id,
            achievement_id=achievement.id,
            current_value=progress.current,
            max_value=progress.max,
            metadata={
                "type": achievement.type.value,
                "criteria": achievement.criteria.model_dump(exclude_none=True),
                **extra,
            },
        )

    def check_and_unlock_achievements(self) -> list[str]:
        """Unlock every achieved, not-yet-unlocked achievement. Returns the new ids."""
        newly_unlocked: list[str] = []

        for status in self.get_achievements_with_status():
            if status.is_unlocked or not status.progress.achieved:
                continue
            achievement = status.definition
            progress = status.progress
            try:
                self.storage.save_user_achievement(
                    UserAchievement(
                        user_id=self.user_id,
                        achievement_id=achievement.id,
                        progress_data={
                            "progress": progress.current,
                            "max_progress": progress.max,
                            "percentage": progress.percentage,
                            "unlocked_value": progress.current,
                        },
                    )
                )
                self.storage.save_achievement_progress(self._progress_record(achievement, progress))
            except _STORAGE_ERRORS as e:
                logger.warning("Failed to unlock achievement %s: %s", achievement.id, e)
                continue
            newly_unlocked.append(achievement.id)

        if newly_unlocked:
            logger.info("User %s unlocked %d achievements: %s", self.user_id, len(newly_unlocked), newly_unlocked)
        return newly_unlocked

    def update_progress(self) -> None:
        """Upsert a progress record for every catalog entry."""
        checked_at = datetime.now(UTC).isoformat()
        for status in self.get_achievements_with_status():
            try:
                self.storage.save_achievement_progress(
                    self._progress_record(status.definition, status.progress, last_checked=checked_at)
                )
            except _STORAGE_ERRORS as e:
                logger.warning("Failed to update progress for %s: %s", status.definition.id, e)
