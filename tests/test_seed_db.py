import unittest

from app.config.settings import settings
from app.models.account import AdminAccount
from seed_db import seed
from tests.api_test_client import ApiTestCase


class TestSeedAdmin(ApiTestCase):
    def test_creates_admin_once(self) -> None:
        with self.Session() as db:
            first = seed(db)
            second = seed(db)
            self.assertEqual(first.id, second.id)
            self.assertEqual(db.query(AdminAccount).count(), 1)

        resp = self.login(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["role"], "admin")


if __name__ == "__main__":
    unittest.main()
