from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from edulearn.core.identity import AdminIdentity, Identity, UserIdentity
from edulearn.core.security import InvalidToken, MalformedToken, decode_token
from edulearn.db.session import SessionLocal
from edulearn.models import Admin, AdminRole, User

TOKEN_HEADER = "x-auth-token"


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_identity(token: Optional[str] = Header(None, alias=TOKEN_HEADER)) -> Identity:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    try:
        return decode_token(token)
    except MalformedToken as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token structure",
        ) from exc
    except InvalidToken as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        ) from exc


def get_current_admin(identity: Identity = Depends(get_identity)) -> AdminIdentity:
    if not isinstance(identity, AdminIdentity) or not identity.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return identity


def get_current_superadmin(
    identity: AdminIdentity = Depends(get_current_admin),
    db: Session = Depends(get_db),
) -> Admin:
    admin = db.query(Admin).filter(Admin.id == identity.id).first()
    if not admin or not admin.is_active or admin.role != AdminRole.superadmin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Superadmin role required")
    return admin


def get_current_account(
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> User:
    if not isinstance(identity, UserIdentity):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account required")
    user = db.query(User).filter(User.id == identity.id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User no longer exists")
    return user
