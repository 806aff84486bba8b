from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime
from app.config.database import Base

class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    actor_id = Column(Integer, nullable=True) # admin_info.id or users.id depending on actor_role
    actor_role = Column(String(20), nullable=True)
    action = Column(String(50), nullable=False) # e.g. "DEACTIVATE_USER", "DELETE_USER"
    details = Column(Text, nullable=True)
    timestamp = Column(DateTime, default=datetime.utcnow)
