"""Acting identity, as asserted by the upstream authentication layer.

Authentication itself happens before requests reach this service; the
gateway forwards the verified identity in ``X-Actor-Id`` / ``X-Actor-Admin``.
"""

from fastapi import Header

from catalog_admin.domain.entities import Actor
from catalog_admin.domain.exceptions import AuthorizationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


async def get_current_actor(
    x_actor_id: str | None = Header(None),
    x_actor_admin: str | None = Header(None),
) -> Actor:
    """FastAPI dependency — the authenticated actor of this request."""
    if not x_actor_id or not x_actor_id.strip():
        raise AuthorizationError("Unauthorized - authenticated actor required")
    is_admin = (x_actor_admin or "").strip().lower() in _TRUTHY
    return Actor(id=x_actor_id.strip(), is_admin=is_admin)


async def get_admin_actor(
    x_actor_id: str | None = Header(None),
    x_actor_admin: str | None = Header(None),
) -> Actor:
    """FastAPI dependency — like get_current_actor, but rejects non-admins."""
    actor = await get_current_actor(x_actor_id, x_actor_admin)
    if not actor.is_admin:
        raise AuthorizationError()
    return actor
