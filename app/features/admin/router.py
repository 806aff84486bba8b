import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Any, List, Optional
from pydantic import BaseModel
from app.config.database import get_db
from app.features.audit.router import log_action
from app.features.auth.policy import require_permission
from app.features.auth.session import SessionContext
from app.features.inventory.categories import CATEGORIES
from app.models.account import Account, AccountStatus, InvalidStatusTransition, Role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])

manage_users = require_permission("admin.users")

# Pydantic Models
class UserResponse(BaseModel):
    id: int
    full_name: str
    email: str
    role: Role
    status: AccountStatus

    class Config:
        from_attributes = True

class StatusUpdate(BaseModel):
    # Checked by hand so every bad value is a 400, not a 422
    status: Any = None

class InventoryRow(BaseModel):
    id: int
    name: str
    price: float
    category: str
    status: Optional[str]

_ACTIONS = {
    (AccountStatus.ACTIVE, AccountStatus.INACTIVE): "DEACTIVATE_USER",
    (AccountStatus.INACTIVE, AccountStatus.ACTIVE): "ACTIVATE_USER",
    (AccountStatus.DELETED, AccountStatus.ACTIVE): "RESTORE_USER",
}

def get_user_or_404(db: Session, user_id: int) -> Account:
    user = db.get(Account, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

def apply_status(db: Session, admin: SessionContext, user: Account, target: AccountStatus) -> AccountStatus:
    current = user.status
    try:
        new_status = current.transition_to(target)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if new_status is current:
        return current

    action = _ACTIONS.get((current, new_status), "DELETE_USER")
    user.status = new_status
    # Status change and its audit entry commit together
    log_action(db, admin, action=action, details=f"{user.email} (ID: {user.id}): {current.value} -> {new_status.value}")
    db.commit()

    logger.info("Admin #%s: %s for %s (%s -> %s)", admin.subject_id, action, user.email, current.value, new_status.value)
    return new_status

@router.get("/users", response_model=List[UserResponse])
def read_users(db: Session = Depends(get_db), admin: SessionContext = Depends(manage_users)):
    # Deleted accounts are listed too so they can be restored
    return db.query(Account).order_by(Account.id.desc()).all()

@router.put("/users/{user_id}/status")
def update_user_status(user_id: int, body: StatusUpdate, db: Session = Depends(get_db), admin: SessionContext = Depends(manage_users)):
    try:
        target = AccountStatus.parse(body.status)
    except ValueError:
        target = None
    if target not in (AccountStatus.ACTIVE, AccountStatus.INACTIVE):
        raise HTTPException(status_code=400, detail="Invalid status. Must be 'active' or 'inactive'.")

    user = get_user_or_404(db, user_id)
    new_status = apply_status(db, admin, user, target)
    return {"message": f"User status updated to {new_status.value}", "status": new_status.value}

@router.post("/users/{user_id}/toggle")
def toggle_user_status(user_id: int, db: Session = Depends(get_db), admin: SessionContext = Depends(manage_users)):
    """Activate / deactivate / restore button: deleted and inactive become active, active becomes inactive."""
    user = get_user_or_404(db, user_id)
    new_status = apply_status(db, admin, user, user.status.toggled())
    return {"message": f"User status updated to {new_status.value}", "status": new_status.value}

@router.delete("/users/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db), admin: SessionContext = Depends(manage_users)):
    user = get_user_or_404(db, user_id)
    apply_status(db, admin, user, AccountStatus.DELETED)
    return {"message": "User deleted successfully"}

@router.get("/inventory", response_model=List[InventoryRow])
def read_inventory(db: Session = Depends(get_db), admin: SessionContext = Depends(require_permission("admin.inventory"))):
    # One query per category, in order, no transaction
    inventory = []
    for spec in CATEGORIES.values():
        items = db.query(spec.model).order_by(spec.model.id.asc()).all()
        inventory.extend(spec.to_inventory(item) for item in items)
    return inventory
