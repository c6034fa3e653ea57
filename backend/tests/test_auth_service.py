from socialstream.shared.db.store import Collection, CollectionStore
from socialstream.shared.models.enums import UserTier
from socialstream.shared.models.user import StoredUser
from socialstream.shared.repositories.user_repository import UserRepository
from socialstream.shared.services import auth_service as auth
from socialstream.shared.services.auth_service import AuthService

from conftest import TEST_PASSWORD


def test_register_creates_bronze_user_without_logging_in(auth_service: AuthService) -> None:
    result = auth_service.register("admin", "Admin User", TEST_PASSWORD)

    assert result.success
    assert result.message == "Registration successful! Please log in."
    user = result.user
    assert user.username == "admin"
    assert user.name == "Admin User"
    assert user.email == "admin@socialstream.tr"
    assert "seed=admin" in user.avatar
    assert (user.points, user.post_count, user.tier) == (0, 0, UserTier.BRONZE)
    assert auth_service.current_session() is None


def test_register_rejects_username_in_other_case(auth_service: AuthService, make_user) -> None:
    make_user("admin")

    result = auth_service.register("Admin", "Someone Else", TEST_PASSWORD)

    assert not result.success
    assert result.error_code == auth.USERNAME_TAKEN
    assert len(auth_service.list_users()) == 1


def test_register_validation_order(auth_service: AuthService) -> None:
    assert auth_service.register("", "Name", TEST_PASSWORD).error_code == auth.MISSING_FIELDS
    assert auth_service.register("bob", "Name", "secret1", "secret2").error_code == auth.PASSWORD_MISMATCH
    short = auth_service.register("bob", "Name", "abc", "abc")
    assert short.error_code == auth.PASSWORD_TOO_SHORT
    assert short.message == "Password must be at least 6 characters."
    assert auth_service.list_users() == []


def test_credential_is_hashed_and_never_returned(
    auth_service: AuthService, store: CollectionStore, make_user
) -> None:
    make_user("admin")
    auth_service.login("admin", TEST_PASSWORD)

    raw_user = store.read(Collection.USERS)[0]
    assert raw_user["passwordHash"] != TEST_PASSWORD
    assert raw_user["passwordHash"].startswith("$2")

    session_record = store.read_record(Collection.CURRENT_USER, auth_service.session_id)
    assert "passwordHash" not in session_record
    for user in auth_service.list_users():
        assert "password_hash" not in user.model_dump()


def test_login_sets_session(auth_service: AuthService, make_user) -> None:
    registered = make_user("admin")

    result = auth_service.login("ADMIN", TEST_PASSWORD)

    assert result.success
    assert result.user.id == registered.id
    assert auth_service.current_session() == result.user


def test_login_unknown_user(auth_service: AuthService) -> None:
    result = auth_service.login("ghost", TEST_PASSWORD)

    assert not result.success
    assert result.error_code == auth.USER_NOT_FOUND
    assert result.message == "User not found."


def test_wrong_password_leaves_session_unchanged(auth_service: AuthService, make_user, logged_in_user) -> None:
    make_user("bob")

    result = auth_service.login("bob", "not-the-password")

    assert not result.success
    assert result.error_code == auth.WRONG_PASSWORD
    assert auth_service.current_session().id == logged_in_user.id


def test_wrong_password_does_not_open_session(auth_service: AuthService, make_user) -> None:
    make_user("admin")

    auth_service.login("admin", "wrongpass")

    assert auth_service.current_session() is None


def test_logout_is_unconditional(auth_service: AuthService, logged_in_user) -> None:
    auth_service.logout()
    assert auth_service.current_session() is None

    auth_service.logout()
    assert auth_service.current_session() is None


def test_save_user_keeps_credential_and_refreshes_session(
    auth_service: AuthService, logged_in_user
) -> None:
    updated = logged_in_user.model_copy(update={"points": 50, "post_count": 5})

    saved = auth_service.save_user(updated)

    assert saved == updated
    assert auth_service.get_user(logged_in_user.id).points == 50
    assert auth_service.current_session().points == 50
    assert auth_service.login("admin", TEST_PASSWORD).success


def test_save_user_does_not_touch_other_session(auth_service: AuthService, make_user, logged_in_user) -> None:
    bob = make_user("bob")

    auth_service.save_user(bob.model_copy(update={"points": 10}))

    assert auth_service.current_session().id == logged_in_user.id
    assert auth_service.current_session().points == 0


def test_save_user_ignores_unknown_id(auth_service: AuthService, logged_in_user) -> None:
    stranger = logged_in_user.model_copy(update={"id": "nobody"})

    assert auth_service.save_user(stranger) is None
    assert len(auth_service.list_users()) == 1


def test_unreadable_session_is_treated_as_logged_out(store: CollectionStore, adapter) -> None:
    adapter.set("test_current_user_abc", '{"id": "x"}')

    assert AuthService(store, "abc").current_session() is None


def test_save_user_derives_tier_from_post_count(auth_service: AuthService, logged_in_user) -> None:
    auth_service.save_user(logged_in_user.model_copy(update={"post_count": 1500}))

    stored = auth_service.get_user(logged_in_user.id)
    assert stored.post_count == 1500
    assert stored.tier is UserTier.VERIFIED
    assert auth_service.current_session().tier is UserTier.VERIFIED


def test_save_user_overrides_inconsistent_tier(auth_service: AuthService, make_user) -> None:
    bob = make_user("bob")

    saved = auth_service.save_user(bob.model_copy(update={"post_count": 3, "tier": UserTier.DIAMOND}))

    assert saved.tier is UserTier.BRONZE
    assert auth_service.get_user(bob.id).tier is UserTier.BRONZE


def test_user_record_survives_store_round_trip(store: CollectionStore) -> None:
    users = UserRepository(store)
    stored = StoredUser(
        username="carol",
        name="Carol",
        email="carol@socialstream.tr",
        avatar="https://example.com/carol.svg",
        points=2010,
        post_count=201,
        tier=UserTier.SILVER,
        password_hash="$2b$04$abcdefghijklmnopqrstuv",
    )
    expected = stored.public()

    users.create(stored)
    reread = users.get_public(stored.id)

    assert reread.model_dump() == expected.model_dump()
    assert reread.joined_at == stored.joined_at
    assert reread.tier is UserTier.SILVER
    assert "password_hash" not in reread.model_dump()
    assert users.get(stored.id).password_hash == stored.password_hash


def test_login_issues_fresh_session_id(auth_service: AuthService, make_user) -> None:
    make_user("admin")
    assert auth_service.session_id is None

    first = auth_service.login("admin", TEST_PASSWORD)
    second = auth_service.login("admin", TEST_PASSWORD)

    assert first.session_id and second.session_id
    assert first.session_id != second.session_id
    assert auth_service.session_id == second.session_id
    assert AuthService(auth_service.store, first.session_id).current_session() is None


def test_client_contexts_are_isolated(store: CollectionStore, make_user) -> None:
    make_user("admin")
    make_user("bob")
    alice_ctx = AuthService(store)
    bob_ctx = AuthService(store)

    alice_ctx.login("admin", TEST_PASSWORD)

    assert AuthService(store).current_session() is None
    assert bob_ctx.current_session() is None

    bob_ctx.login("bob", TEST_PASSWORD)
    alice_ctx.logout()

    assert alice_ctx.current_session() is None
    assert bob_ctx.current_session().username == "bob"
    assert AuthService(store, bob_ctx.session_id).current_session().username == "bob"
