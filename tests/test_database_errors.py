import unittest
from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query

from main import app
from tests.api_test_client import ApiTestCase


class TestDatabaseErrors(ApiTestCase):
    def test_query_failure_is_a_logged_500(self) -> None:
        token = self.token_for("s@campus.edu", "student")
        client = TestClient(app, raise_server_exceptions=False)
        down = OperationalError("SELECT * FROM canteen_items", {}, Exception("server has gone away"))

        with mock.patch.object(Query, "order_by", side_effect=down):
            with self.assertLogs("campus_hub", "ERROR") as logs:
                resp = client.get("/api/canteen/items", headers=self.bearer(token))

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Database error"})
        self.assertIn("GET /api/canteen/items", logs.output[0])

    def test_database_is_usable_after_a_failed_request(self) -> None:
        token = self.token_for("s@campus.edu", "student")
        client = TestClient(app, raise_server_exceptions=False)
        with mock.patch.object(Query, "order_by", side_effect=OperationalError("SELECT 1", {}, Exception("boom"))):
            with self.assertLogs("campus_hub", "ERROR"):
                client.get("/api/hostel/items", headers=self.bearer(token))
        self.assertEqual(client.get("/api/hostel/items", headers=self.bearer(token)).status_code, 200)


if __name__ == "__main__":
    unittest.main()
