from dataclasses import dataclass, replace
from datetime import datetime, timezone
from app.models.account import Role


class MalformedClaims(ValueError):
    pass


@dataclass(frozen=True)
class SessionContext:
    """Identity of the caller for one request.

    Built from verified token claims by the access guard and handed to route
    handlers explicitly. ``role`` is refreshed from the credential store on
    every request, so it can differ from the role the token was issued with.
    """

    subject_id: int
    role: Role
    issued_at: datetime
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @classmethod
    def from_claims(cls, claims: dict) -> "SessionContext":
        try:
            subject_id = int(claims["id"])
            role = Role(claims["role"])
            issued_at = datetime.fromtimestamp(int(claims["iat"]), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedClaims(str(e)) from e
        return cls(subject_id=subject_id, role=role, issued_at=issued_at, expires_at=expires_at)

    def with_role(self, role: Role) -> "SessionContext":
        return replace(self, role=role)
