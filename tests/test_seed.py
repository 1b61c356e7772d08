"""Tests for fzscripts.services.seed: idempotent bootstrap admin provisioning."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from fzscripts.models import Script, User
from fzscripts.services import auth
from fzscripts.services.seed import SAMPLE_SCRIPT_TITLE, seed_bootstrap_admin
from tests.support import new_session, reset_db


def _settings(sample_script: bool = True) -> MagicMock:
    settings = MagicMock()
    settings.BOOTSTRAP_ADMIN_USERNAME = "Faze"
    settings.BOOTSTRAP_ADMIN_PASSWORD = SecretStr("fzx")
    settings.SEED_SAMPLE_SCRIPT = sample_script
    return settings


class TestSeedBootstrapAdmin(unittest.TestCase):
    def setUp(self) -> None:
        reset_db()
        self.db = new_session()

    def tearDown(self) -> None:
        self.db.close()

    def _count(self, model: type) -> int:
        return self.db.execute(select(func.count()).select_from(model)).scalar_one()

    def test_creates_privileged_admin_with_sample_script(self) -> None:
        admin = seed_bootstrap_admin(self.db, _settings())
        self.assertEqual(admin.username, "Faze")
        self.assertTrue(admin.is_admin)
        self.assertTrue(admin.verified)
        sample = self.db.execute(select(Script)).scalar_one()
        self.assertEqual(sample.title, SAMPLE_SCRIPT_TITLE)
        self.assertEqual(sample.user_id, admin.id)
        self.assertEqual(sample.language, "lua")
        self.assertIn("Auto Game Bot by Faze", sample.code)

    def test_sample_script_can_be_disabled(self) -> None:
        seed_bootstrap_admin(self.db, _settings(sample_script=False))
        self.assertEqual(self._count(Script), 0)

    def test_idempotent(self) -> None:
        first = seed_bootstrap_admin(self.db, _settings())
        second = seed_bootstrap_admin(self.db, _settings())
        self.assertEqual(first.id, second.id)
        self.assertEqual(self._count(User), 1)
        self.assertEqual(self._count(Script), 1)

    def test_admin_can_log_in_after_seeding(self) -> None:
        seed_bootstrap_admin(self.db, _settings())
        user, _ = auth.login(self.db, "Faze", "fzx")
        self.assertTrue(user.is_admin)
        self.assertTrue(user.verified)

    def test_lost_insert_race_returns_winner(self) -> None:
        winner = seed_bootstrap_admin(self.db, _settings(sample_script=False))
        with patch(
            "fzscripts.services.seed.users.get_user_by_username",
            side_effect=[None, winner],
        ):
            result = seed_bootstrap_admin(self.db, _settings())
        self.assertEqual(result.id, winner.id)
        self.assertEqual(self._count(User), 1)
        self.assertEqual(self._count(Script), 0)

    def test_failed_sample_script_leaves_no_admin(self) -> None:
        with patch.object(
            self.db, "commit", side_effect=IntegrityError("INSERT", {}, Exception("boom"))
        ):
            with self.assertRaises(IntegrityError):
                seed_bootstrap_admin(self.db, _settings())
        self.assertEqual(self._count(User), 0)
        self.assertEqual(self._count(Script), 0)

        admin = seed_bootstrap_admin(self.db, _settings())
        self.assertEqual(self._count(Script), 1)
        self.assertTrue(admin.is_admin)


if __name__ == "__main__":
    unittest.main()
