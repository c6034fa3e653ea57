"""
Session Repository

Each client context owns one session record, keyed by an opaque session id
issued at login:

    {namespace}_current_user_{session_id}  →  credential-stripped User

A repository without a session id reads as logged out and never writes.
"""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from socialstream.shared.core.exceptions import ServiceUnavailableError
from socialstream.shared.core.logging import get_logger
from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.user import User

logger = get_logger(__name__)


class SessionRepository:
    """Reads and writes the session record of one client context."""

    def __init__(self, store: CollectionStore, session_id: Optional[str] = None) -> None:
        self.store = store
        self.session_id = session_id

    def get(self) -> Optional[User]:
        """The logged-in user, or None."""
        if not self.session_id:
            return None
        raw = self.store.read_record(Collection.CURRENT_USER, self.session_id)
        if raw is None:
            return None
        try:
            return User.from_record(raw)
        except PydanticValidationError:
            logger.warning("Discarding unreadable session record")
            return None

    def set(self, user: User) -> None:
        """
        Store user as this context's session.

        Raises:
            ServiceUnavailableError: If there is no session id or the store rejects the write
        """
        if not self.session_id:
            raise ServiceUnavailableError("No session id for this client")
        if not self.store.write_record(Collection.CURRENT_USER, user.to_record(), self.session_id):
            raise ServiceUnavailableError("Could not save session")

    def clear(self) -> None:
        """Remove this context's session, if any."""
        if self.session_id:
            self.store.delete(Collection.CURRENT_USER, self.session_id)
