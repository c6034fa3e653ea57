"""
User Repository

Operations on the users collection. This is the only place where the
credential-bearing StoredUser is parsed; everything it hands to callers
outside AuthService is a public User.

Common Operations:
==================
- get_by_username()   → Case-insensitive lookup (with credential)
- username_exists()   → Uniqueness check for registration
- list_public()       → All users without credentials
- get_public()        → One user without credential
"""

from typing import Optional

from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.user import StoredUser, User
from socialstream.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[StoredUser]):
    """Repository for the users collection."""

    def __init__(self, store: CollectionStore) -> None:
        super().__init__(StoredUser, Collection.USERS, store)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_by_username(self, username: str) -> Optional[StoredUser]:
        """
        Get a stored user by username, ignoring case.

        Returns:
            StoredUser (including password hash) if found, None otherwise
        """
        wanted = username.lower()
        for user in self.all():
            if user.username.lower() == wanted:
                return user
        return None

    def username_exists(self, username: str) -> bool:
        """Check whether a username is taken, ignoring case."""
        return self.get_by_username(username) is not None

    def list_public(self) -> list[User]:
        """All users, credential-stripped."""
        return [user.public() for user in self.all()]

    def get_public(self, user_id: str) -> Optional[User]:
        """One user by id, credential-stripped."""
        user = self.get(user_id)
        return user.public() if user else None

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def create(self, user: StoredUser) -> StoredUser:
        """Append a newly registered user."""
        return self.append(user)

    def save_public(self, user: User) -> Optional[User]:
        """
        Persist changes to an existing user's public fields.

        The stored password hash is left untouched because the public
        record does not carry it. Users are only created by registration,
        so an unknown id is not written.

        Returns:
            The saved user, or None if no user has this id
        """
        raw = self.store.read(self.collection)
        for index, existing in enumerate(raw):
            if isinstance(existing, dict) and existing.get("id") == user.id:
                raw[index] = {**existing, **user.to_record()}
                self._write(raw)
                return user
        return None
