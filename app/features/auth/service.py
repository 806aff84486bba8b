import logging
from datetime import timedelta
from typing import Optional
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.account import Account, AdminAccount, AccountStatus, Role
from app.utils.security import verify_password, get_password_hash, create_access_token
from app.config.settings import settings

logger = logging.getLogger(__name__)

# Unknown and deleted accounts must be indistinguishable to the caller
USER_DOES_NOT_EXIST = "User does not exist."
ACCOUNT_DEACTIVATED_MESSAGE = "Your account is deactivated. Contact Admin."
INVALID_PASSWORD = "Invalid Password"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def authenticate_admin(db: Session, email: str, password: str) -> Optional[AdminAccount]:
    admin = db.query(AdminAccount).filter(AdminAccount.email == email).first()
    if not admin or not verify_password(password, admin.password):
        return None
    return admin


def authenticate_user(db: Session, email: str, password: str) -> Account:
    user = db.query(Account).filter(Account.email == email).first()
    if not user or user.status is AccountStatus.DELETED:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=USER_DOES_NOT_EXIST)
    if user.status is AccountStatus.INACTIVE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCOUNT_DEACTIVATED_MESSAGE)
    if not verify_password(password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_PASSWORD)
    return user


def create_user_token(subject_id: int, role: Role) -> str:
    return create_access_token(
        data={"sub": str(subject_id), "id": subject_id, "role": role.value},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def login(db: Session, email: str, password: str) -> dict:
    """Admin table first, then the general account table."""
    email = normalize_email(email)

    admin = authenticate_admin(db, email, password)
    if admin:
        logger.info("Admin login for %s", email)
        return {
            "message": "Login successful",
            "token": create_user_token(admin.id, Role.ADMIN),
            "user": {
                "id": admin.id,
                "full_name": admin.full_name or "Admin",
                "email": admin.email,
                "role": Role.ADMIN.value,
                "status": AccountStatus.ACTIVE.value,
            },
        }

    try:
        user = authenticate_user(db, email, password)
    except HTTPException as e:
        logger.info("Login rejected for %s: %s", email, e.detail)
        raise

    logger.info("Login for %s as %s", email, user.role.value)
    return {
        "message": "Login successful",
        "token": create_user_token(user.id, user.role),
        "user": {
            "id": user.id,
            "full_name": user.full_name,
            "email": user.email,
            "role": user.role.value,
            "status": user.status.value,
        },
    }


def register_account(
    db: Session,
    full_name: str,
    email: str,
    password: str,
    role: Role,
    contact_number: Optional[str] = None,
    gender: Optional[str] = None,
) -> Account:
    if role is Role.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin registration is restricted.")

    email = normalize_email(email)
    duplicate = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")
    if db.query(Account).filter(Account.email == email).first():
        raise duplicate

    account = Account(
        full_name=full_name.strip(),
        email=email,
        password=get_password_hash(password),
        role=role,
        status=AccountStatus.ACTIVE,
        contact_number=contact_number,
        gender=gender,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise duplicate
    db.refresh(account)
    logger.info("Registered %s as %s", email, role.value)
    return account
