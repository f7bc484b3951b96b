"""Domain entities for the admin activity trail."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Actor:
    """Authenticated identity handed in by the outer (auth) layer."""

    id: str
    is_admin: bool = False


@dataclass
class ActivityRecord:
    """One action performed by an admin, as stored in the activity list."""

    actor_id: str
    action: str
    detail: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "actorId": self.actor_id,
            "action": self.action,
            "details": self.detail,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any], actor_id: str | None = None) -> "ActivityRecord":
        """Rebuild a record from its stored JSON form.

        Entries written without ``actorId`` take ``actor_id``, the owner of
        the list they were read from. Raises KeyError / TypeError / ValueError on
        malformed entries.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"activity entry must be an object, got {type(raw).__name__}")
        owner = raw.get("actorId") or actor_id
        if not owner:
            raise KeyError("actorId")
        return cls(
            actor_id=owner,
            action=raw["action"],
            detail=raw.get("details"),
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )
