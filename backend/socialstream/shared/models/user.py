"""
User Records

Two shapes of the same record:

- User: the public view. Returned by every read path, stored as the session.
- StoredUser: User plus the password hash. Only the user repository and
  AuthService ever hold one.
"""

from datetime import datetime

from pydantic import Field

from socialstream.shared.models.base import RecordModel, new_id, utc_now
from socialstream.shared.models.enums import UserTier


class User(RecordModel):
    """Registered user, credential-free."""

    id: str = Field(default_factory=new_id)
    username: str
    name: str
    email: str
    avatar: str
    points: int = Field(default=0, ge=0)
    post_count: int = Field(default=0, ge=0)
    tier: UserTier = UserTier.BRONZE
    joined_at: datetime = Field(default_factory=utc_now)


class StoredUser(User):
    """User record as persisted in the users collection."""

    password_hash: str

    def public(self) -> User:
        """Return the credential-stripped view of this record."""
        return User.model_validate(self.model_dump(exclude={"password_hash"}))
