import logging
from typing import Optional

from sqlalchemy.orm import Session

from edulearn.core.errors import ConflictError
from edulearn.core.security import hash_password, verify_password
from edulearn.models import Admin, AdminRole, User

logger = logging.getLogger(__name__)


def authenticate_admin(db: Session, email: str, password: str) -> Optional[Admin]:
    admin = db.query(Admin).filter(Admin.email == email, Admin.is_active.is_(True)).first()
    if not admin:
        logger.warning(f"Admin not found or inactive: {email}")
        return None
    if not verify_password(password, admin.password_hash):
        logger.warning(f"Password mismatch for admin: {email}")
        return None
    return admin


def create_admin(db: Session, username: str, email: str, password: str, role: AdminRole) -> Admin:
    if db.query(Admin).filter(Admin.email == email).first():
        raise ConflictError("Admin already exists")
    if db.query(Admin).filter(Admin.username == username).first():
        raise ConflictError("Username already taken")

    admin = Admin(username=username, email=email, password_hash=hash_password(password), role=role)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Admin created: {admin.email} ({admin.role.value})")
    return admin


def register_user(db: Session, name: str, email: str, password: str) -> User:
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("User already exists")

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User registered: {user.email}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login attempt for user: {email}")
        return None
    return user
