"""
Tests for the credential and activity stores
"""
import pytest

from ytclone.core.exceptions import BadRequest, Conflict, InvalidCredentials, NotFound
from ytclone.db.models import Favorite, History, User
from ytclone.schemas.history import HistoryCreate
from ytclone.schemas.user import UserCreate
from ytclone.services.favorite_service import favorite_service
from ytclone.services.history_service import history_service
from ytclone.services.user_service import user_service


def create_user(db, username="alice", email="alice@example.com", password="pw"):
    return user_service.create_user(
        db, UserCreate(username=username, email=email, password=password)
    )


class TestUserService:
    """Tests for registration and authentication"""

    def test_create_user_stores_hash(self, db_session):
        user = create_user(db_session)
        assert user.id is not None
        assert user.password_hash != "pw"

    def test_duplicate_email_conflicts(self, db_session):
        create_user(db_session, username="alice", email="a@x.com")
        with pytest.raises(Conflict):
            create_user(db_session, username="bob", email="a@x.com")
        assert db_session.query(User).count() == 1

    def test_duplicate_username_conflicts(self, db_session):
        create_user(db_session, username="alice", email="a@x.com")
        with pytest.raises(Conflict):
            create_user(db_session, username="alice", email="other@x.com")
        assert db_session.query(User).count() == 1

    def test_username_match_is_case_sensitive(self, db_session):
        create_user(db_session, username="alice", email="a@x.com")
        create_user(db_session, username="Alice", email="b@x.com")
        assert db_session.query(User).count() == 2

    def test_empty_fields_rejected(self, db_session):
        with pytest.raises(BadRequest):
            create_user(db_session, username="", email="a@x.com")

    def test_authenticate_success(self, db_session):
        created = create_user(db_session, email="a@x.com", password="pw")
        user = user_service.authenticate_user(db_session, "a@x.com", "pw")
        assert user.id == created.id

    def test_unknown_email_and_wrong_password_look_the_same(self, db_session):
        create_user(db_session, email="a@x.com", password="pw")

        with pytest.raises(InvalidCredentials) as wrong_password:
            user_service.authenticate_user(db_session, "a@x.com", "nope")
        with pytest.raises(InvalidCredentials) as unknown_email:
            user_service.authenticate_user(db_session, "ghost@x.com", "pw")

        assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials"


class TestHistoryService:
    """Tests for watch and search history"""

    def test_add_watch_defaults(self, db_session):
        user = create_user(db_session)
        entry = history_service.add_entry(db_session, user.id, HistoryCreate(video_id="abc"))

        assert entry.action_type == "watch"
        assert entry.search_query == ""
        assert entry.watched_at is not None

    def test_add_search_entry(self, db_session):
        user = create_user(db_session)
        entry = history_service.add_entry(
            db_session, user.id,
            HistoryCreate(video_id="", search_query="cats", action_type="search")
        )
        assert entry.action_type == "search"
        assert entry.video_id == ""

    def test_both_empty_rejected(self, db_session):
        user = create_user(db_session)
        with pytest.raises(BadRequest):
            history_service.add_entry(
                db_session, user.id, HistoryCreate(video_id="", search_query="")
            )
        assert db_session.query(History).count() == 0

    def test_list_is_newest_first_and_capped(self, db_session, monkeypatch):
        from ytclone.config import settings
        monkeypatch.setattr(settings, "HISTORY_LIMIT", 3)

        user = create_user(db_session)
        for i in range(5):
            history_service.add_entry(db_session, user.id, HistoryCreate(video_id=f"v{i}"))

        entries = history_service.list_entries(db_session, user.id)
        assert [e.video_id for e in entries] == ["v4", "v3", "v2"]

    def test_list_only_owner_entries(self, db_session):
        alice = create_user(db_session)
        bob = create_user(db_session, username="bob", email="bob@example.com")
        history_service.add_entry(db_session, alice.id, HistoryCreate(video_id="a"))
        history_service.add_entry(db_session, bob.id, HistoryCreate(video_id="b"))

        assert [e.video_id for e in history_service.list_entries(db_session, bob.id)] == ["b"]

    def test_delete_other_users_entry_is_not_found(self, db_session):
        alice = create_user(db_session)
        bob = create_user(db_session, username="bob", email="bob@example.com")
        entry = history_service.add_entry(db_session, alice.id, HistoryCreate(video_id="a"))

        with pytest.raises(NotFound):
            history_service.delete_entry(db_session, bob.id, entry.id)
        assert db_session.query(History).filter(History.id == entry.id).count() == 1

    def test_delete_missing_entry_is_not_found(self, db_session):
        user = create_user(db_session)
        with pytest.raises(NotFound):
            history_service.delete_entry(db_session, user.id, 999)

    def test_delete_own_entry(self, db_session):
        user = create_user(db_session)
        entry = history_service.add_entry(db_session, user.id, HistoryCreate(video_id="a"))
        history_service.delete_entry(db_session, user.id, entry.id)
        assert db_session.query(History).count() == 0

    def test_clear_only_touches_owner(self, db_session):
        alice = create_user(db_session)
        bob = create_user(db_session, username="bob", email="bob@example.com")
        history_service.add_entry(db_session, alice.id, HistoryCreate(video_id="a"))
        history_service.add_entry(db_session, alice.id, HistoryCreate(search_query="q"))
        history_service.add_entry(db_session, bob.id, HistoryCreate(video_id="b"))

        assert history_service.clear(db_session, alice.id) == 2
        assert db_session.query(History).count() == 1

    def test_clear_empty_history_is_noop(self, db_session):
        user = create_user(db_session)
        assert history_service.clear(db_session, user.id) == 0


class TestFavoriteService:
    """Tests for saved videos"""

    def test_duplicate_favorite_conflicts(self, db_session):
        user = create_user(db_session)
        favorite_service.add_favorite(db_session, user.id, "v1", "Title", "thumb")

        with pytest.raises(Conflict):
            favorite_service.add_favorite(db_session, user.id, "v1", "Title", "thumb")

        favorites = favorite_service.list_favorites(db_session, user.id)
        assert [f.video_id for f in favorites] == ["v1"]

    def test_same_video_for_different_users(self, db_session):
        alice = create_user(db_session)
        bob = create_user(db_session, username="bob", email="bob@example.com")
        favorite_service.add_favorite(db_session, alice.id, "v1")
        favorite_service.add_favorite(db_session, bob.id, "v1")
        assert db_session.query(Favorite).count() == 2

    def test_missing_video_id_rejected(self, db_session):
        user = create_user(db_session)
        with pytest.raises(BadRequest):
            favorite_service.add_favorite(db_session, user.id, None)

    def test_list_newest_first(self, db_session):
        user = create_user(db_session)
        for video_id in ("v1", "v2", "v3"):
            favorite_service.add_favorite(db_session, user.id, video_id)

        favorites = favorite_service.list_favorites(db_session, user.id)
        assert [f.video_id for f in favorites] == ["v3", "v2", "v1"]

    def test_unique_constraint_is_final_authority(self, db_session):
        user = create_user(db_session)
        db_session.add(Favorite(user_id=user.id, video_id="v1"))
        db_session.commit()

        from sqlalchemy.exc import IntegrityError
        db_session.add(Favorite(user_id=user.id, video_id="v1"))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()
