"""Bounded per-admin activity trail kept in the shared key/value store."""

import json
import logging

from catalog_admin.application.interfaces import KeyValueStore
from catalog_admin.domain.entities import ActivityRecord
from catalog_admin.domain.exceptions import CacheError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 100
DEFAULT_READ_LIMIT = 20


class ActivityLog:
    """Most-recent-first list of actions per actor, capped at ``max_entries``.

    Recording never raises: activity tracking must not fail the operation
    it describes.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        namespace: str = "admin",
        max_entries: int = DEFAULT_MAX_ENTRIES,
        default_limit: int = DEFAULT_READ_LIMIT,
    ):
        self._store = store
        self._namespace = namespace
        self.max_entries = max_entries
        self.default_limit = default_limit

    def key_for(self, actor_id: str) -> str:
        return f"{self._namespace}:activity:{actor_id}"

    async def record(self, actor_id: str, action: str, detail: str | None = None) -> None:
        key = self.key_for(actor_id)
        entry = ActivityRecord(actor_id=actor_id, action=action, detail=detail)
        try:
            await self._store.lpush(key, json.dumps(entry.to_dict()))
            await self._store.ltrim(key, 0, self.max_entries - 1)
        except CacheError as exc:
            logger.warning("Activity tracking failed for '%s' (%s): %s", actor_id, action, exc.reason)

    async def recent(self, actor_id: str, limit: int | None = None) -> list[ActivityRecord]:
        """Return up to ``limit`` records, newest first. Empty on store failure."""
        limit = self.default_limit if limit is None else limit
        if limit <= 0:
            return []

        key = self.key_for(actor_id)
        try:
            raw_items = await self._store.lrange(key, 0, limit - 1)
        except CacheError as exc:
            logger.warning("Activity read failed for '%s': %s", actor_id, exc.reason)
            return []

        records: list[ActivityRecord] = []
        for raw in raw_items:
            try:
                records.append(ActivityRecord.from_dict(json.loads(raw), actor_id))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed activity entry in '%s'", key)
        return records
