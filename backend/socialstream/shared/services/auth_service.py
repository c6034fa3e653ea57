"""
Authentication Service

Registration, login, logout and the current session.

Service Pattern:
================
    Handler → AuthService → UserRepository / SessionRepository → CollectionStore
                       ↘ SecurityUtils (bcrypt)

Results:
========
Registration and login never raise for user mistakes. They return an
AuthResult carrying a user-facing message and a machine-readable
error_code, and leave the store untouched on failure.

    result = service.login("Admin", "secret1")
    if not result.success:
        print(result.error_code, result.message)   # WRONG_PASSWORD Wrong password.

Side Effects:
=============
- register(): writes the users collection only, never the session
- login(): issues a fresh session id and writes that session only
- logout(): deletes this client context's session only
- save_user(): writes the users collection, and the session when the saved
  user is the one logged in

Client Contexts:
================
An AuthService is bound to one client context through its session id
(None until login). Two services over the same store with different ids
never see each other's session.
"""

from dataclasses import dataclass
from typing import Optional

from socialstream.config.settings import settings
from socialstream.shared.core.logging import get_logger
from socialstream.shared.db.store import CollectionStore
from socialstream.shared.models.enums import UserTier
from socialstream.shared.models.user import StoredUser, User
from socialstream.shared.repositories.session_repository import SessionRepository
from socialstream.shared.repositories.user_repository import UserRepository
from socialstream.shared.services.tier_service import calculate_tier
from socialstream.shared.utils.security import SecurityUtils

logger = get_logger(__name__)


# Error codes carried by failed AuthResults
MISSING_FIELDS = "MISSING_FIELDS"
PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
USERNAME_TAKEN = "USERNAME_TAKEN"
USER_NOT_FOUND = "USER_NOT_FOUND"
WRONG_PASSWORD = "WRONG_PASSWORD"


@dataclass
class AuthResult:
    """Outcome of a registration or login attempt."""

    success: bool
    message: str
    error_code: Optional[str] = None
    user: Optional[User] = None
    session_id: Optional[str] = None


class AuthService:
    """
    Service for identity and session management.

    Attributes:
        store: Collection store
        users: UserRepository instance
        sessions: SessionRepository of this client context
    """

    def __init__(self, store: CollectionStore, session_id: Optional[str] = None) -> None:
        self.store = store
        self.users = UserRepository(store)
        self.sessions = SessionRepository(store, session_id)

    @property
    def session_id(self) -> Optional[str]:
        """Session id of this client context, None before login."""
        return self.sessions.session_id

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION
    # ═══════════════════════════════════════════════════════════════════════════

    def register(
        self,
        username: str,
        display_name: str,
        password: str,
        confirm_password: Optional[str] = None,
    ) -> AuthResult:
        """
        Register a new user.

        Checks, in order: required fields, password confirmation (when
        given), minimum password length, case-insensitive username
        uniqueness. The new user starts at 0 posts, 0 points, BRONZE, and
        is not logged in.

        Args:
            username: Desired username (surrounding whitespace is dropped)
            display_name: Real/display name
            password: Plain text password (stored as a bcrypt hash)
            confirm_password: Optional repeat of the password

        Returns:
            AuthResult; on success user is the public record
        """
        username = (username or "").strip()
        display_name = (display_name or "").strip()

        if not username or not display_name or not password:
            return AuthResult(False, "Please fill in all fields.", MISSING_FIELDS)

        if confirm_password is not None and confirm_password != password:
            return AuthResult(False, "Passwords do not match.", PASSWORD_MISMATCH)

        if len(password) < settings.MIN_PASSWORD_LENGTH:
            return AuthResult(
                False,
                f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters.",
                PASSWORD_TOO_SHORT,
            )

        if self.users.username_exists(username):
            logger.info("Registration rejected, username taken", username=username)
            return AuthResult(False, "Username is already taken.", USERNAME_TAKEN)

        stored = StoredUser(
            username=username,
            name=display_name,
            email=f"{username}@{settings.EMAIL_DOMAIN}",
            avatar=settings.AVATAR_URL_TEMPLATE.format(seed=username),
            points=0,
            post_count=0,
            tier=UserTier.BRONZE,
            password_hash=SecurityUtils.hash_password(password),
        )
        self.users.create(stored)

        logger.info("User registered", user_id=stored.id, username=username)
        return AuthResult(True, "Registration successful! Please log in.", user=stored.public())

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSION
    # ═══════════════════════════════════════════════════════════════════════════

    def login(self, username: str, password: str) -> AuthResult:
        """
        Authenticate and open the session.

        On success any previous session of this context is dropped, a fresh
        session id is issued and the credential-stripped user is stored under
        it. The id is returned in the result. On failure the session is left
        as it was.
        """
        username = (username or "").strip()
        if not username or not password:
            return AuthResult(False, "Username and password are required.", MISSING_FIELDS)

        stored = self.users.get_by_username(username)
        if stored is None:
            logger.info("Login failed, unknown user", username=username)
            return AuthResult(False, "User not found.", USER_NOT_FOUND)

        if not SecurityUtils.verify_password(password, stored.password_hash):
            logger.info("Login failed, wrong password", user_id=stored.id)
            return AuthResult(False, "Wrong password.", WRONG_PASSWORD)

        user = stored.public()
        self.sessions.clear()
        self.sessions = SessionRepository(self.store, SecurityUtils.generate_session_id())
        self.sessions.set(user)

        logger.info("User logged in", user_id=user.id)
        return AuthResult(True, "Login successful.", user=user, session_id=self.session_id)

    def logout(self) -> None:
        """Close the session unconditionally."""
        self.sessions.clear()
        logger.info("Session cleared")

    def current_session(self) -> Optional[User]:
        """The logged-in user of this client context, or None."""
        return self.sessions.get()

    # ═══════════════════════════════════════════════════════════════════════════
    # USER RECORDS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_user(self, user_id: str) -> Optional[User]:
        """Public record of a user."""
        return self.users.get_public(user_id)

    def list_users(self) -> list[User]:
        """Public records of all users."""
        return self.users.list_public()

    def save_user(self, user: User) -> Optional[User]:
        """
        Persist a user's public fields, keeping the stored credential.

        The tier is recomputed from post_count before writing; a tier passed
        in is never stored as given. When the saved user is the one logged in
        to this context, the session record is refreshed with the new values.

        Returns:
            The saved user, or None if no stored user has this id
        """
        user = user.model_copy(update={"tier": calculate_tier(user.post_count)})
        saved = self.users.save_public(user)
        if saved is None:
            logger.warning("Save skipped, unknown user", user_id=user.id)
            return None

        current = self.sessions.get()
        if current is not None and current.id == user.id:
            self.sessions.set(user)
        return saved
