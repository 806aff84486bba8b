from app.config.database import SessionLocal, Base, engine
from app.config.settings import settings
from app.models.account import AdminAccount
from app.utils.security import get_password_hash

def seed(db=None):
    """Creates the admin_info record from ADMIN_EMAIL / ADMIN_PASSWORD if missing."""
    own_session = db is None
    if own_session:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
    try:
        email = settings.ADMIN_EMAIL.strip().lower()
        admin = db.query(AdminAccount).filter(AdminAccount.email == email).first()
        if admin:
            print("Admin already exists")
            return admin
        print(f"Creating admin: {email}")
        admin = AdminAccount(
            full_name=settings.ADMIN_NAME,
            email=email,
            password=get_password_hash(settings.ADMIN_PASSWORD),
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return admin
    finally:
        if own_session:
            db.close()

if __name__ == "__main__":
    seed()
