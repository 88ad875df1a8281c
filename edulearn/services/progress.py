from datetime import datetime
from typing import List

from sqlalchemy.orm import Session, selectinload

from edulearn.core.errors import NotFoundError
from edulearn.models import ProgressEntry, Topic, User


def upsert_progress(db: Session, user: User, topic_id: int, completed: bool) -> List[ProgressEntry]:
    if not db.query(Topic.id).filter(Topic.id == topic_id).first():
        raise NotFoundError("Topic not found")

    entry = next((item for item in user.progress if item.topic_id == topic_id), None)
    if entry is not None:
        entry.completed = completed
        entry.last_accessed = datetime.utcnow()
    else:
        user.progress.append(
            ProgressEntry(topic_id=topic_id, completed=completed, last_accessed=datetime.utcnow())
        )

    db.commit()
    db.refresh(user)
    return user.progress


def list_progress(db: Session, user: User) -> List[ProgressEntry]:
    return (
        db.query(ProgressEntry)
        .options(selectinload(ProgressEntry.topic).selectinload(Topic.prerequisites))
        .filter(ProgressEntry.user_id == user.id)
        .order_by(ProgressEntry.id)
        .all()
    )
