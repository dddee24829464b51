"""Per-browser UI state.

A browser session owns one set of view models, views and controllers, the way
a desktop window would. They live in memory and are keyed by an id kept in the
signed session cookie.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
import logging
import uuid

from app.html.view_manager import ViewManager


logger = logging.getLogger(__name__)


class SessionUser:
    """The username logged in for one browser session."""

    def __init__(self) -> None:
        self.username: str | None = None

    def get_current_username(self) -> str | None:
        return self.username

    def set_current_username(self, username: str | None) -> None:
        self.username = username


class UISession:
    def __init__(self, view_manager: ViewManager, current_user: SessionUser) -> None:
        self.id = uuid.uuid4().hex
        self.view_manager = view_manager
        self.current_user = current_user
        self.last_seen = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"<UISession(id={self.id}, user={self.current_user.username})>"

    def touch(self) -> None:
        self.last_seen = datetime.now(timezone.utc)


class SessionRegistry:
    def __init__(
        self,
        factory: Callable[[], UISession],
        *,
        ttl: timedelta = timedelta(hours=12),
    ) -> None:
        self.factory = factory
        self.ttl = ttl
        self.sessions: dict[str, UISession] = {}

    def __len__(self) -> int:
        return len(self.sessions)

    def get_or_create(self, session_id: str | None) -> UISession:
        self.expire()
        session = self.sessions.get(session_id or "")
        if session is None:
            session = self.factory()
            self.sessions[session.id] = session
            logger.info("Started UI session %s", session.id)
        session.touch()
        return session

    def expire(self, now: datetime | None = None) -> None:
        now = datetime.now(timezone.utc) if now is None else now
        stale = [
            sid for sid, session in self.sessions.items()
            if now - session.last_seen > self.ttl
        ]
        for sid in stale:
            logger.info("Expired UI session %s", sid)
            del self.sessions[sid]
