import enum
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.types import TypeDecorator
from app.config.database import Base


class Role(str, enum.Enum):
    STUDENT = "student"
    CANTEEN = "canteen"
    STATIONERY = "stationery"
    HOSTEL = "hostel"
    ADMIN = "admin"


class InvalidStatusTransition(ValueError):
    pass


class AccountStatus(str, enum.Enum):
    """Account lifecycle flag.

    active <-> inactive is the admin toggle, active|inactive -> deleted is the
    soft delete, and deleted -> active is the only way back out of deleted.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"

    @classmethod
    def parse(cls, value) -> "AccountStatus":
        # Raises ValueError for anything outside the enum, non-strings included
        if not isinstance(value, str):
            raise ValueError(f"not a status: {value!r}")
        return cls(value.strip().lower())

    @property
    def is_live(self) -> bool:
        return self is AccountStatus.ACTIVE

    def toggled(self) -> "AccountStatus":
        if self is AccountStatus.ACTIVE:
            return AccountStatus.INACTIVE
        return AccountStatus.ACTIVE

    def transition_to(self, target: "AccountStatus") -> "AccountStatus":
        if target is self:
            return self
        if (self, target) not in _ALLOWED_TRANSITIONS:
            raise InvalidStatusTransition(f"Cannot change status from '{self.value}' to '{target.value}'")
        return target


_ALLOWED_TRANSITIONS = {
    (AccountStatus.ACTIVE, AccountStatus.INACTIVE),
    (AccountStatus.INACTIVE, AccountStatus.ACTIVE),
    (AccountStatus.ACTIVE, AccountStatus.DELETED),
    (AccountStatus.INACTIVE, AccountStatus.DELETED),
    (AccountStatus.DELETED, AccountStatus.ACTIVE),
}

class LowercaseEnum(TypeDecorator):
    """Enum stored by value in a VARCHAR column.

    Rows written by older clients may hold "Inactive" or " ACTIVE"; those
    load as the matching member. Values outside the enum still raise.
    """

    impl = String(20)
    cache_ok = True

    def __init__(self, enum_cls, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.enum_cls = enum_cls

    def _coerce(self, value):
        if isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(str(value).strip().lower())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value)


def _enum_column(enum_cls, **kwargs):
    return Column(LowercaseEnum(enum_cls), **kwargs)


class Account(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False) # passlib hash, never plaintext
    role = _enum_column(Role, nullable=False)
    status = _enum_column(AccountStatus, nullable=False, default=AccountStatus.ACTIVE)
    contact_number = Column(String(20), nullable=True)
    gender = Column(String(20), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class AdminAccount(Base):
    __tablename__ = "admin_info"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(120), nullable=False, default="Admin")
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
