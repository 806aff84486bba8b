import unittest

from app.features.auth.policy import ROLE_POLICY, is_permitted, require_permission
from app.features.inventory.categories import CATEGORIES
from app.models.account import Role


class TestRolePolicy(unittest.TestCase):
    def test_every_category_has_list_and_write(self) -> None:
        for spec in CATEGORIES.values():
            self.assertEqual(ROLE_POLICY[f"{spec.name}.list"], frozenset(Role))
            self.assertEqual(ROLE_POLICY[f"{spec.name}.write"], frozenset({spec.staff_role, Role.ADMIN}))

    def test_admin_allowed_wherever_a_staff_role_is(self) -> None:
        for permission, roles in ROLE_POLICY.items():
            self.assertIn(Role.ADMIN, roles, permission)

    def test_staff_cannot_write_other_categories(self) -> None:
        self.assertFalse(is_permitted(Role.CANTEEN, "hostel.write"))
        self.assertFalse(is_permitted(Role.HOSTEL, "stationery.write"))
        self.assertFalse(is_permitted(Role.STUDENT, "canteen.write"))
        self.assertTrue(is_permitted(Role.CANTEEN, "canteen.write"))

    def test_admin_routes_are_admin_only(self) -> None:
        for permission in ("admin.users", "admin.inventory", "admin.audit"):
            self.assertEqual(ROLE_POLICY[permission], frozenset({Role.ADMIN}))

    def test_student_catalogue(self) -> None:
        self.assertEqual(ROLE_POLICY["student.browse"], frozenset({Role.STUDENT, Role.ADMIN}))

    def test_unknown_permission_fails_at_build_time(self) -> None:
        with self.assertRaises(KeyError):
            require_permission("canteen.refund")


if __name__ == "__main__":
    unittest.main()
