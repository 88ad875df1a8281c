import argparse
import logging
from typing import Optional

from sqlalchemy.orm import Session

from edulearn.core.config import configure_logging, get_settings
from edulearn.core.security import hash_password
from edulearn.db.base import Base
from edulearn.db.session import SessionLocal, engine
from edulearn.models import Admin, AdminRole, Content, ProgressEntry, Subject, Topic, User

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def create_superadmin(
    db: Session,
    email: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> Optional[Admin]:
    settings = get_settings()
    email = email or settings.default_admin_email
    if db.query(Admin).filter(Admin.email == email).first():
        logger.info(f"Admin already exists: {email}")
        return None

    admin = Admin(
        username=username or settings.default_admin_username,
        email=email,
        password_hash=hash_password(password or settings.default_admin_password),
        role=AdminRole.superadmin,
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Superadmin created: {admin.email}. Change the password after first login.")
    return admin


def reset_admins(db: Session) -> Admin:
    deleted = db.query(Admin).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted {deleted} admin(s)")
    return create_superadmin(db)


def clear_content(db: Session) -> dict:
    """Wipe catalog and user data. Admin accounts and notes are kept."""
    counts = {
        "subjects": db.query(Subject).count(),
        "topics": db.query(Topic).count(),
        "contents": db.query(Content).count(),
        "users": db.query(User).count(),
    }
    db.query(ProgressEntry).delete(synchronize_session=False)
    for user in db.query(User).all():
        user.bookmarks = []
    db.flush()
    db.query(Content).delete(synchronize_session=False)
    for topic in db.query(Topic).all():
        topic.prerequisites = []
    db.flush()
    db.query(Topic).delete(synchronize_session=False)
    db.query(Subject).delete(synchronize_session=False)
    db.query(User).delete(synchronize_session=False)
    db.commit()
    logger.info(
        f"Deleted {counts['subjects']} subjects, {counts['topics']} topics, "
        f"{counts['contents']} contents, {counts['users']} users"
    )
    return counts


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="python -m edulearn.db.init_db")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("create-tables")
    create = commands.add_parser("create-admin")
    create.add_argument("--email")
    create.add_argument("--username")
    create.add_argument("--password")
    commands.add_parser("reset-admin")
    commands.add_parser("clear-content")
    args = parser.parse_args(argv)

    configure_logging()
    if args.command == "create-tables":
        create_tables()
        return

    db = SessionLocal()
    try:
        if args.command == "create-admin":
            create_superadmin(db, args.email, args.username, args.password)
        elif args.command == "reset-admin":
            reset_admins(db)
        elif args.command == "clear-content":
            clear_content(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
