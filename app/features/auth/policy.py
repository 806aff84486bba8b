"""Static role policy: permission name -> roles allowed to use it.

Every protected route names exactly one permission from ``ROLE_POLICY``.
Admin is part of every staff role set, so admins can do anything a staff
member can.
"""
import logging
from typing import Dict, FrozenSet
from fastapi import Depends, HTTPException, status
from app.models.account import Role
from app.features.auth.router import get_current_session
from app.features.auth.session import SessionContext

logger = logging.getLogger(__name__)

EVERY_ROLE: FrozenSet[Role] = frozenset(Role)
ADMIN_ONLY: FrozenSet[Role] = frozenset({Role.ADMIN})


def staff(role: Role) -> FrozenSet[Role]:
    return frozenset({role, Role.ADMIN})


ROLE_POLICY: Dict[str, FrozenSet[Role]] = {
    "canteen.list": EVERY_ROLE,
    "canteen.write": staff(Role.CANTEEN),
    "stationery.list": EVERY_ROLE,
    "stationery.write": staff(Role.STATIONERY),
    "hostel.list": EVERY_ROLE,
    "hostel.write": staff(Role.HOSTEL),
    "student.browse": staff(Role.STUDENT),
    "admin.users": ADMIN_ONLY,
    "admin.inventory": ADMIN_ONLY,
    "admin.audit": ADMIN_ONLY,
}


def is_permitted(role: Role, permission: str) -> bool:
    return role in ROLE_POLICY[permission]


def require_permission(permission: str):
    allowed = ROLE_POLICY[permission] # unknown names fail when the router is built

    def checker(session: SessionContext = Depends(get_current_session)) -> SessionContext:
        if session.role not in allowed:
            logger.info("Denied %s to %s #%s", permission, session.role.value, session.subject_id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You do not have permission.")
        return session

    return checker
