# app/create_admin.py
# Seed the first admin account:  python -m app.create_admin
import logging

from werkzeug.security import generate_password_hash

from app.config import ADMIN_EMAIL, ADMIN_PASSWORD
from app.database import SessionLocal, init_db
from app.auth.models import User, UserRole

log = logging.getLogger(__name__)


def create_admin(db, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD):
    """Create the admin user with the 'admin' role. Returns (user, created)."""
    email = email.strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if user:
        log.info("Admin user %s already exists.", email)
        return user, False

    user = User(email=email, password=generate_password_hash(password))
    user.roles.append(UserRole(role="admin"))
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("Admin user created: %s", email)
    return user, True


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        create_admin(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
