"""Daily cooking activity tracking."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from pantry_tracker.domain.inventory import DailyActivityStatus, DailyStatus
from pantry_tracker.services.records import (
    as_rows,
    daily_status_to_row,
    parse_daily_status,
)
from pantry_tracker.services.storage import KeyValueStorage, daily_statuses_key
from pantry_tracker.services.timemath import Clock

_logger = logging.getLogger(__name__)


def status_after_consumption(
    existing: DailyActivityStatus | None, first_consumption_today: bool
) -> DailyActivityStatus | None:
    """Return the day's status once a consumption has been recorded.

    A status already present for the day is never replaced.
    """
    if existing is not None:
        return existing
    if first_consumption_today:
        return DailyActivityStatus.COOKED
    return None


@dataclass
class DailyActivityService:
    """Keeps at most one status per user and calendar day."""

    storage: KeyValueStorage
    clock: Clock

    def today(self, user_id: str) -> DailyStatus | None:
        """Return the status recorded for the current day, if any."""
        return self.get(user_id, self.clock().date())

    def get(self, user_id: str, day: date) -> DailyStatus | None:
        """Return the status recorded for a day, if any."""
        for status in self.list_statuses(user_id):
            if status.day == day:
                return status
        return None

    def list_statuses(self, user_id: str) -> list[DailyStatus]:
        """Return all statuses for a user ordered by day."""
        key = daily_statuses_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        statuses = [parse_daily_status(row) for row in rows]
        return sorted(statuses, key=lambda status: status.day)

    def set_status(
        self, user_id: str, day: date, status: DailyActivityStatus
    ) -> DailyStatus:
        """Create or overwrite the status for a day."""
        key = daily_statuses_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        for index, row in enumerate(rows):
            existing = parse_daily_status(row)
            if existing.day != day:
                continue
            updated = DailyStatus(
                id=existing.id, user_id=user_id, day=day, status=status
            )
            rows[index] = daily_status_to_row(updated)
            self.storage.set(key, rows)
            _logger.info(
                "Daily status updated: user=%s day=%s status=%s",
                user_id,
                day,
                status.value,
            )
            return updated

        created = DailyStatus(id=uuid4(), user_id=user_id, day=day, status=status)
        rows.append(daily_status_to_row(created))
        self.storage.set(key, rows)
        _logger.info(
            "Daily status created: user=%s day=%s status=%s",
            user_id,
            day,
            status.value,
        )
        return created

    def set_today(self, user_id: str, status: DailyActivityStatus) -> DailyStatus:
        """Create or overwrite the status for the current day."""
        return self.set_status(user_id, self.clock().date(), status)

    def record_consumption(
        self, user_id: str, day: date, first_consumption_today: bool
    ) -> DailyStatus | None:
        """Apply the implicit cooked rule after a consumption."""
        existing = self.get(user_id, day)
        current = existing.status if existing else None
        resolved = status_after_consumption(current, first_consumption_today)
        if resolved is None or resolved == current:
            return existing
        return self.set_status(user_id, day, resolved)
