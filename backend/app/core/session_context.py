"""
Session context with an explicit lifecycle.

The context is the single owner of auth state (session, profile flag, roles).
State changes are pushed to subscribers; nothing polls. Each restore is tagged
with a generation so a response that arrives after sign-out, or after a newer
restore started, is dropped instead of being applied to stale state.
"""
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional
import logging

from sqlalchemy.orm import Session

from app.core.route_guard import RouteDecision, decide_route, requirement_for
from app.models.user import User
from app.repositories.profile_repository import ProfileRepository
from app.repositories.role_repository import RoleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    loading: bool
    has_session: bool
    profile_completed: bool
    roles: FrozenSet[str] = field(default_factory=frozenset)
    user_id: Optional[int] = None


Listener = Callable[[SessionSnapshot], None]


class SessionContext:
    def __init__(self):
        self._generation = 0
        self._loading = True
        self._user_id: Optional[int] = None
        self._profile_completed = False
        self._roles: FrozenSet[str] = frozenset()
        self._listeners: List[Listener] = []

    @property
    def generation(self) -> int:
        return self._generation

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            loading=self._loading,
            has_session=self._user_id is not None,
            profile_completed=self._profile_completed,
            roles=self._roles,
            user_id=self._user_id,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Session listener failed")

    # --- lifecycle ---

    def begin_restore(self) -> int:
        """Start restoring a session; returns the generation the result must carry."""
        self._generation += 1
        self._loading = True
        self._notify()
        return self._generation

    def apply_restore(
        self,
        generation: int,
        user_id: Optional[int],
        profile_completed: bool = False,
        roles: Iterable[str] = (),
    ) -> bool:
        if generation != self._generation:
            logger.debug(f"Discarding stale session restore (gen {generation}, current {self._generation})")
            return False
        self._user_id = user_id
        self._profile_completed = bool(profile_completed) if user_id is not None else False
        self._roles = frozenset(roles) if user_id is not None else frozenset()
        self._loading = False
        self._notify()
        return True

    def set_profile_completed(self, generation: int, completed: bool) -> bool:
        if generation != self._generation or self._user_id is None:
            return False
        self._profile_completed = completed
        self._notify()
        return True

    def teardown(self) -> None:
        """Sign-out: invalidate in-flight restores and clear state."""
        self._generation += 1
        self._user_id = None
        self._profile_completed = False
        self._roles = frozenset()
        self._loading = False
        self._notify()

    # --- decisions ---

    def decide(self, path: str) -> RouteDecision:
        snap = self.snapshot()
        return decide_route(
            has_session=snap.has_session,
            profile_completed=snap.profile_completed,
            current_path=path,
            roles=snap.roles,
            requirement=requirement_for(path),
            loading=snap.loading,
        )


def restore_session(db: Session, user: Optional[User], context: Optional[SessionContext] = None) -> SessionContext:
    """Build (or refresh) a context for the caller identified by a bearer token."""
    context = context or SessionContext()
    generation = context.begin_restore()
    if user is None:
        context.apply_restore(generation, None)
        return context
    context.apply_restore(
        generation,
        user.id,
        profile_completed=ProfileRepository().is_completed(db, user.id),
        roles=RoleRepository().get_roles(db, user.id),
    )
    return context
