"""Tests for fzscripts.services.auth: registration, login, logout, verification and profile updates."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr
from sqlalchemy.exc import IntegrityError

from fzscripts.core.errors import (
    Conflict,
    Forbidden,
    InvalidCredentials,
    NotFound,
    Unauthenticated,
    ValidationError,
)
from fzscripts.services import auth
from tests.support import make_user, new_session, reset_db


def _settings(bootstrap: str = "Faze") -> MagicMock:
    settings = MagicMock()
    settings.BOOTSTRAP_ADMIN_USERNAME = bootstrap
    settings.BOOTSTRAP_ADMIN_PASSWORD = SecretStr("fzx")
    settings.SEED_SAMPLE_SCRIPT = False
    return settings


class AuthTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reset_db()
        self.db = new_session()
        self.settings = _settings()

    def tearDown(self) -> None:
        self.db.close()


class TestRegister(AuthTestCase):
    def test_register_returns_user_and_live_session(self) -> None:
        user, sid = auth.register(self.db, "roblox_dev", "secret123", self.settings)
        self.assertEqual(user.username, "roblox_dev")
        self.assertFalse(user.is_admin)
        self.assertFalse(user.verified)
        self.assertEqual(user.profile_picture, "")
        self.assertEqual(auth.current_user(self.db, sid).id, user.id)

    def test_register_keeps_profile_picture(self) -> None:
        user, _ = auth.register(
            self.db, "pic_user", "secret123", self.settings,
            profile_picture="https://example.com/me.png",
        )
        self.assertEqual(user.profile_picture, "https://example.com/me.png")

    def test_duplicate_username_is_conflict(self) -> None:
        auth.register(self.db, "roblox_dev", "secret123", self.settings)
        with self.assertRaises(Conflict) as ctx:
            auth.register(self.db, "roblox_dev", "another1", self.settings)
        self.assertEqual(ctx.exception.message, "Username already taken")
        self.assertFalse(auth.check_username_available(self.db, "roblox_dev"))

    def test_unique_constraint_race_is_conflict(self) -> None:
        with patch(
            "fzscripts.services.auth.users.create_user",
            side_effect=IntegrityError("INSERT", {}, Exception("duplicate")),
        ):
            with self.assertRaises(Conflict):
                auth.register(self.db, "racer", "secret123", self.settings)

    def test_bootstrap_name_is_admin_and_verified(self) -> None:
        user, _ = auth.register(self.db, "Faze", "fzx", self.settings)
        self.assertTrue(user.is_admin)
        self.assertTrue(user.verified)

    def test_public_user_has_no_password_field(self) -> None:
        user, _ = auth.register(self.db, "roblox_dev", "secret123", self.settings)
        dumped = user.model_dump(by_alias=True)
        self.assertNotIn("password", dumped)
        self.assertNotIn("passwordHash", dumped)
        self.assertNotIn("password_hash", user.model_dump())


class TestLogin(AuthTestCase):
    def setUp(self) -> None:
        super().setUp()
        make_user(self.db, "alice", "secret123")

    def test_login_success(self) -> None:
        user, sid = auth.login(self.db, "alice", "secret123")
        self.assertEqual(user.username, "alice")
        self.assertEqual(auth.current_user(self.db, sid).username, "alice")

    def test_unknown_user_and_wrong_password_look_the_same(self) -> None:
        with self.assertRaises(InvalidCredentials) as unknown:
            auth.login(self.db, "nobody", "secret123")
        with self.assertRaises(InvalidCredentials) as wrong:
            auth.login(self.db, "alice", "wrong-password")
        self.assertEqual(unknown.exception.message, wrong.exception.message)
        self.assertEqual(unknown.exception.status_code, 401)


class TestLogoutAndCurrentUser(AuthTestCase):
    def test_current_user_after_logout_is_unauthenticated(self) -> None:
        make_user(self.db, "alice", "secret123")
        _, sid = auth.login(self.db, "alice", "secret123")
        auth.logout(self.db, sid)
        with self.assertRaises(Unauthenticated):
            auth.current_user(self.db, sid)

    def test_logout_without_session_succeeds(self) -> None:
        auth.logout(self.db, None)
        auth.logout(self.db, "unknown")

    def test_current_user_without_session(self) -> None:
        with self.assertRaises(Unauthenticated):
            auth.current_user(self.db, None)


class TestCheckUsername(AuthTestCase):
    def test_available_then_taken(self) -> None:
        self.assertTrue(auth.check_username_available(self.db, "newbie"))
        make_user(self.db, "newbie")
        self.assertFalse(auth.check_username_available(self.db, "newbie"))


class TestSetVerification(AuthTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin, _ = auth.register(self.db, "Faze", "fzx", self.settings)
        self.member, _ = auth.register(self.db, "member", "secret123", self.settings)

    def test_non_admin_is_forbidden(self) -> None:
        with self.assertRaises(Forbidden):
            auth.set_verification(self.db, self.member, self.member.id, True)
        self.assertFalse(auth.get_public_user(self.db, self.member.id).verified)

    def test_admin_sets_and_clears_flag(self) -> None:
        updated = auth.set_verification(self.db, self.admin, self.member.id, True)
        self.assertTrue(updated.verified)
        updated = auth.set_verification(self.db, self.admin, self.member.id, False)
        self.assertFalse(updated.verified)

    def test_missing_target_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            auth.set_verification(self.db, self.admin, 9999, True)


class TestUpdateProfilePicture(AuthTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice, _ = auth.register(self.db, "alice", "secret123", self.settings)
        self.bob, _ = auth.register(self.db, "bob_builds", "secret123", self.settings)

    def test_owner_can_update(self) -> None:
        updated = auth.update_profile_picture(
            self.db, self.alice, self.alice.id, "https://img.example/a.png"
        )
        self.assertEqual(updated.profile_picture, "https://img.example/a.png")

    def test_other_user_is_forbidden(self) -> None:
        with self.assertRaises(Forbidden):
            auth.update_profile_picture(
                self.db, self.bob, self.alice.id, "https://img.example/b.png"
            )

    def test_blank_url_is_validation_error(self) -> None:
        with self.assertRaises(ValidationError):
            auth.update_profile_picture(self.db, self.alice, self.alice.id, "   ")


if __name__ == "__main__":
    unittest.main()
