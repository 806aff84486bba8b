from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime
from app.config.database import get_db
from app.features.auth.policy import require_permission
from app.features.auth.session import SessionContext
from app.models.audit import AuditLog

router = APIRouter(prefix="/api/admin/audit", tags=["Audit"])

class AuditResponse(BaseModel):
    id: int
    actor_id: Optional[int]
    actor_role: Optional[str]
    action: str
    details: Optional[str]
    timestamp: datetime

    class Config:
        from_attributes = True

def log_action(db: Session, actor: SessionContext, action: str, details: str = None):
    """Adds the entry to the caller's transaction; the caller commits."""
    log = AuditLog(actor_id=actor.subject_id, actor_role=actor.role.value, action=action, details=details)
    db.add(log)

@router.get("", response_model=List[AuditResponse])
def read_audit_logs(db: Session = Depends(get_db), admin: SessionContext = Depends(require_permission("admin.audit"))):
    return db.query(AuditLog).order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(100).all()
