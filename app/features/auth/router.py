import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, EmailStr, Field, constr
from sqlalchemy.orm import Session
from jose import JWTError
from app.config.database import get_db
from app.features.auth import service
from app.features.auth.session import SessionContext, MalformedClaims
from app.models.account import Account, AdminAccount, Role
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

# auto_error=False so a missing header gets our own 401 message
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)

ACCOUNT_DEACTIVATED = "ACCOUNT_DEACTIVATED"

class LoginRequest(BaseModel):
    email: str
    password: str

class RegisterRequest(BaseModel):
    full_name: constr(strip_whitespace=True, min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(min_length=1)
    role: Role
    contact_number: Optional[str] = Field(default=None, max_length=20)
    gender: Optional[str] = Field(default=None, max_length=20)

def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def check_liveness(db: Session, session: SessionContext) -> SessionContext:
    """Re-reads the subject on every request; the token alone is not enough."""
    if session.is_admin:
        if db.get(AdminAccount, session.subject_id) is None:
            logger.warning("Admin #%s no longer exists", session.subject_id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account not found. Auto-logout.")
        return session

    account = db.get(Account, session.subject_id)
    if account is None:
        logger.warning("Account #%s no longer exists", session.subject_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account not found. Auto-logout.")
    if not account.status.is_live:
        logger.info("Rejected token for %s account #%s", account.status.value, account.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCOUNT_DEACTIVATED)
    return session.with_role(account.role)

def get_current_session(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> SessionContext:
    if not token:
        raise _unauthenticated("No token provided. Access denied.")
    try:
        session = SessionContext.from_claims(decode_access_token(token))
    except (JWTError, MalformedClaims):
        raise _unauthenticated("Invalid or expired token.")
    return check_liveness(db, session)

@router.post("/login")
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    return service.login(db, credentials.email, credentials.password)

@router.post("/register")
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    service.register_account(
        db,
        full_name=data.full_name,
        email=data.email,
        password=data.password,
        role=data.role,
        contact_number=data.contact_number,
        gender=data.gender,
    )
    return {"message": "User registered successfully!"}
