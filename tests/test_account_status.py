import unittest

from app.models.account import AccountStatus, InvalidStatusTransition


class TestAccountStatus(unittest.TestCase):
    def test_toggle(self) -> None:
        self.assertIs(AccountStatus.ACTIVE.toggled(), AccountStatus.INACTIVE)
        self.assertIs(AccountStatus.INACTIVE.toggled(), AccountStatus.ACTIVE)
        # Restoring a deleted account never lands on inactive
        self.assertIs(AccountStatus.DELETED.toggled(), AccountStatus.ACTIVE)
        self.assertIs(AccountStatus.DELETED.toggled().toggled(), AccountStatus.INACTIVE)

    def test_allowed_transitions(self) -> None:
        self.assertIs(AccountStatus.ACTIVE.transition_to(AccountStatus.INACTIVE), AccountStatus.INACTIVE)
        self.assertIs(AccountStatus.INACTIVE.transition_to(AccountStatus.ACTIVE), AccountStatus.ACTIVE)
        self.assertIs(AccountStatus.ACTIVE.transition_to(AccountStatus.DELETED), AccountStatus.DELETED)
        self.assertIs(AccountStatus.INACTIVE.transition_to(AccountStatus.DELETED), AccountStatus.DELETED)
        self.assertIs(AccountStatus.DELETED.transition_to(AccountStatus.ACTIVE), AccountStatus.ACTIVE)

    def test_same_state_is_a_noop(self) -> None:
        for s in AccountStatus:
            self.assertIs(s.transition_to(s), s)

    def test_deleted_only_leaves_to_active(self) -> None:
        with self.assertRaises(InvalidStatusTransition):
            AccountStatus.DELETED.transition_to(AccountStatus.INACTIVE)

    def test_parse_is_case_insensitive(self) -> None:
        self.assertIs(AccountStatus.parse("Active"), AccountStatus.ACTIVE)
        self.assertIs(AccountStatus.parse(" INACTIVE "), AccountStatus.INACTIVE)
        with self.assertRaises(ValueError):
            AccountStatus.parse("banned")
        for value in (None, 1, True, ["active"]):
            with self.assertRaises(ValueError):
                AccountStatus.parse(value)

    def test_only_active_is_live(self) -> None:
        self.assertEqual([s for s in AccountStatus if s.is_live], [AccountStatus.ACTIVE])


if __name__ == "__main__":
    unittest.main()
