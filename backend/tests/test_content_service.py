import pytest

from socialstream.shared.adapters.memory_adapter import MemoryAdapter
from socialstream.shared.core.exceptions import PostNotFoundError, ServiceUnavailableError, ValidationError
from socialstream.shared.db.store import CollectionStore
from socialstream.shared.models.enums import MediaKind, UserTier
from socialstream.shared.services.auth_service import AuthService
from socialstream.shared.services.content_service import ContentService, infer_media_kind


def _publish(content_service: ContentService, author, description="Sunset", tags=("nature",), **kwargs):
    return content_service.create_post(
        author=author,
        media_kind=kwargs.pop("media_kind", MediaKind.IMAGE),
        source=kwargs.pop("source", "https://example.com/sunset.jpg"),
        description=description,
        tags=tags,
        **kwargs,
    )


def test_create_post_rewards_author(
    content_service: ContentService, auth_service: AuthService, logged_in_user
) -> None:
    _publish(content_service, logged_in_user)

    stored = auth_service.get_user(logged_in_user.id)
    assert stored.post_count == 1
    assert stored.points == 10
    assert auth_service.current_session().points == 10


def test_reward_uses_stored_record_not_stale_session(
    content_service: ContentService, auth_service: AuthService, logged_in_user
) -> None:
    _publish(content_service, logged_in_user)
    _publish(content_service, logged_in_user)

    assert auth_service.get_user(logged_in_user.id).post_count == 2
    assert auth_service.get_user(logged_in_user.id).points == 20


def test_create_post_recomputes_tier(
    content_service: ContentService, auth_service: AuthService, logged_in_user
) -> None:
    auth_service.save_user(logged_in_user.model_copy(update={"post_count": 199, "points": 1990}))

    _publish(content_service, logged_in_user)

    stored = auth_service.get_user(logged_in_user.id)
    assert stored.post_count == 200
    assert stored.tier is UserTier.SILVER


def test_feed_is_most_recent_first(content_service: ContentService, logged_in_user) -> None:
    first = _publish(content_service, logged_in_user, description="first")
    second = _publish(content_service, logged_in_user, description="second")

    assert [post.id for post in content_service.list_posts()] == [second.id, first.id]


def test_author_snapshot_is_frozen(
    content_service: ContentService, auth_service: AuthService, logged_in_user
) -> None:
    post = _publish(content_service, logged_in_user)
    assert post.user_tier is UserTier.BRONZE

    auth_service.save_user(logged_in_user.model_copy(update={"post_count": 1500, "avatar": "new"}))

    stored_post = content_service.get_post(post.id)
    assert stored_post.user_tier is UserTier.BRONZE
    assert stored_post.user_avatar == logged_in_user.avatar
    assert stored_post.username == "admin"
    assert auth_service.get_user(logged_in_user.id).tier is UserTier.VERIFIED


def test_create_post_requires_source_and_description(content_service: ContentService, logged_in_user) -> None:
    with pytest.raises(ValidationError):
        _publish(content_service, logged_in_user, source="  ")
    with pytest.raises(ValidationError):
        _publish(content_service, logged_in_user, description="")

    assert content_service.list_posts() == []


def test_get_missing_post_raises(content_service: ContentService) -> None:
    with pytest.raises(PostNotFoundError):
        content_service.get_post("missing")


def test_list_user_posts(content_service: ContentService, make_user, logged_in_user) -> None:
    bob = make_user("bob")
    mine = _publish(content_service, logged_in_user)
    _publish(content_service, bob)

    assert [post.id for post in content_service.list_user_posts(logged_in_user.id)] == [mine.id]


def test_bookmark_is_idempotent(content_service: ContentService, logged_in_user) -> None:
    post = _publish(content_service, logged_in_user)

    assert content_service.bookmark(post) is True
    assert content_service.bookmark(post) is False

    assert [saved.id for saved in content_service.list_downloads()] == [post.id]


def test_search_matches_users_and_tag_substrings(
    content_service: ContentService, make_user, logged_in_user
) -> None:
    make_user("naturelover", name="Green Fan")
    tagged = _publish(content_service, logged_in_user, description="Evening", tags=("Nature", "sky"))
    _publish(content_service, logged_in_user, description="Coffee", tags=("food",))

    results = content_service.search("NATU")

    assert [user.username for user in results.users] == ["naturelover"]
    assert [post.id for post in results.posts] == [tagged.id]


def test_search_matches_display_name_and_description(
    content_service: ContentService, make_user, logged_in_user
) -> None:
    make_user("bob", name="Robert Green")
    post = _publish(content_service, logged_in_user, description="A green valley", tags=())

    results = content_service.search("green")

    assert [user.username for user in results.users] == ["bob"]
    assert [p.id for p in results.posts] == [post.id]


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_search_returns_nothing(content_service: ContentService, logged_in_user, query: str) -> None:
    _publish(content_service, logged_in_user)

    results = content_service.search(query)

    assert results.users == []
    assert results.posts == []


def test_leaderboard_orders_by_points(
    content_service: ContentService, auth_service: AuthService, make_user, logged_in_user
) -> None:
    bob = make_user("bob")
    carol = make_user("carol")
    auth_service.save_user(bob.model_copy(update={"points": 500}))
    auth_service.save_user(carol.model_copy(update={"points": 70}))

    board = content_service.leaderboard()

    assert [user.username for user in board] == ["bob", "carol", "admin"]
    assert [user.username for user in content_service.leaderboard(1)] == ["bob"]


@pytest.mark.parametrize(
    ("source", "content_type", "kind"),
    [
        ("https://cdn.example.com/clip.MP4", None, MediaKind.VIDEO),
        ("https://cdn.example.com/clip.webm", None, MediaKind.VIDEO),
        ("https://cdn.example.com/photo.png", None, MediaKind.IMAGE),
        ("data:video/mp4;base64,AAAA", None, MediaKind.VIDEO),
        ("data:image/png;base64,AAAA", None, MediaKind.IMAGE),
        ("blob", "video/quicktime", MediaKind.VIDEO),
        ("https://cdn.example.com/clip.mp4", "image/jpeg", MediaKind.IMAGE),
    ],
)
def test_infer_media_kind(source: str, content_type, kind: MediaKind) -> None:
    assert infer_media_kind(source, content_type) is kind


class _ReadOnlyPosts(MemoryAdapter):
    """Accepts every write except to the posts collection."""

    def set(self, key: str, value: str) -> bool:
        if key.endswith("_posts"):
            return False
        return super().set(key, value)


def test_failed_post_write_raises_and_skips_reward() -> None:
    store = CollectionStore(_ReadOnlyPosts(), namespace="test")
    auth_service = AuthService(store)
    auth_service.register("admin", "Admin", "secret1")
    author = auth_service.login("admin", "secret1").user
    content_service = ContentService(store, auth_service)

    with pytest.raises(ServiceUnavailableError):
        _publish(content_service, author)

    assert content_service.list_posts() == []
    assert auth_service.get_user(author.id).post_count == 0
