"""Actor checks against the authoritative user store.

Cached identities are never trusted for authorization; every privileged
operation re-reads the acting user.
"""

from __future__ import annotations

from rentacar.domain.errors import ForbiddenError, InactiveAccountError, UnauthorizedError
from rentacar.domain.user import User
from rentacar.ports.user_repository import UserRepository


def load_actor(user_repository: UserRepository, actor_id: str) -> User:
    """
    Raises:
        UnauthorizedError: If the account no longer exists
        InactiveAccountError: If the account has been deactivated
    """
    actor = user_repository.get_by_id(actor_id)
    if actor is None:
        raise UnauthorizedError("Session is no longer valid, please log in again", actor_id=actor_id)
    if not actor.is_active:
        raise InactiveAccountError(actor_id=actor_id)
    return actor


def require_admin(user_repository: UserRepository, actor_id: str) -> User:
    """
    Raises:
        ForbiddenError: If the actor is not an administrator
    """
    actor = load_actor(user_repository, actor_id)
    if not actor.is_admin:
        raise ForbiddenError("Administrator access required", actor_id=actor_id)
    return actor
