"""Subject/topic/content reads and the admin-side subject writes."""
import logging
from typing import List

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from edulearn.core.errors import ConflictError, NotFoundError
from edulearn.models import Content, Note, ProgressEntry, Subject, Topic
from edulearn.models.topic import topic_prerequisites
from edulearn.models.user import user_bookmarks
from edulearn.schemas.catalog import SubjectCreate, SubjectUpdate

logger = logging.getLogger(__name__)


def list_active_subjects(db: Session) -> List[Subject]:
    return (
        db.query(Subject)
        .filter(Subject.is_active.is_(True))
        .order_by(Subject.order, Subject.id)
        .all()
    )


def list_all_subjects(db: Session) -> List[Subject]:
    return db.query(Subject).order_by(Subject.order, Subject.id).all()


def get_subject_by_slug(db: Session, slug: str) -> Subject:
    subject = db.query(Subject).filter(Subject.slug == slug, Subject.is_active.is_(True)).first()
    if not subject:
        raise NotFoundError("Subject not found")
    return subject


def list_active_topics(db: Session, subject_id: int) -> List[Topic]:
    return (
        db.query(Topic)
        .options(selectinload(Topic.prerequisites))
        .filter(Topic.subject_id == subject_id, Topic.is_active.is_(True))
        .order_by(Topic.order, Topic.id)
        .all()
    )


def get_topic_by_slug(db: Session, slug: str) -> Topic:
    # Topic slugs are only unique per subject; the first active match wins.
    topic = (
        db.query(Topic)
        .options(selectinload(Topic.subject), selectinload(Topic.prerequisites))
        .filter(Topic.slug == slug, Topic.is_active.is_(True))
        .order_by(Topic.id)
        .first()
    )
    if not topic:
        raise NotFoundError("Topic not found")
    return topic


def list_topic_contents(db: Session, topic_id: int) -> List[Content]:
    return (
        db.query(Content)
        .filter(Content.topic_id == topic_id)
        .order_by(Content.order, Content.id)
        .all()
    )


def _ensure_slug_free(db: Session, slug: str, exclude_id: int = None) -> None:
    query = db.query(Subject).filter(Subject.slug == slug)
    if exclude_id is not None:
        query = query.filter(Subject.id != exclude_id)
    if query.first():
        raise ConflictError("Subject slug already exists")


def create_subject(db: Session, payload: SubjectCreate) -> Subject:
    _ensure_slug_free(db, payload.slug)
    subject = Subject(**payload.model_dump())
    db.add(subject)
    db.commit()
    db.refresh(subject)
    logger.info(f"Subject created: {subject.slug}")
    return subject


def update_subject(db: Session, subject_id: int, payload: SubjectUpdate) -> Subject:
    subject = db.query(Subject).filter(Subject.id == subject_id).first()
    if not subject:
        raise NotFoundError("Subject not found")

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("slug") is not None:
        _ensure_slug_free(db, changes["slug"], exclude_id=subject.id)
    for field, value in changes.items():
        setattr(subject, field, value)

    db.commit()
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject_id: int, cascade: bool) -> None:
    """Remove a subject.

    With ``cascade`` its topics go too, along with their contents, bookmarks
    of those contents, progress entries and prerequisite links in either
    direction. Without it only the subject row is removed and its topics stay
    behind with ``subject_id`` cleared.

    Dependent rows are removed explicitly; SQLite does not enforce the
    ``ON DELETE`` rules unless foreign keys are switched on.
    """
    subject = db.query(Subject).filter(Subject.id == subject_id).first()
    if not subject:
        raise NotFoundError("Subject not found")

    if cascade:
        topic_ids = [row.id for row in db.query(Topic.id).filter(Topic.subject_id == subject.id)]
        if topic_ids:
            content_ids = select(Content.id).where(Content.topic_id.in_(topic_ids))
            db.execute(user_bookmarks.delete().where(user_bookmarks.c.content_id.in_(content_ids)))
            db.execute(
                topic_prerequisites.delete().where(
                    or_(
                        topic_prerequisites.c.topic_id.in_(topic_ids),
                        topic_prerequisites.c.prerequisite_id.in_(topic_ids),
                    )
                )
            )
            db.query(ProgressEntry).filter(ProgressEntry.topic_id.in_(topic_ids)).delete(
                synchronize_session=False
            )
            db.query(Content).filter(Content.topic_id.in_(topic_ids)).delete(synchronize_session=False)
            db.query(Topic).filter(Topic.id.in_(topic_ids)).delete(synchronize_session=False)
        logger.info(f"Subject {subject.slug} deleted with {len(topic_ids)} topic(s)")
    else:
        db.query(Topic).filter(Topic.subject_id == subject.id).update(
            {Topic.subject_id: None}, synchronize_session=False
        )
        logger.info(f"Subject {subject.slug} deleted, topics left in place")

    db.delete(subject)
    db.commit()


def collect_stats(db: Session) -> dict:
    return {
        "subjects": db.query(Subject).count(),
        "topics": db.query(Topic).count(),
        "contents": db.query(Content).count(),
        "notes": db.query(Note).count(),
        "total_downloads": db.query(func.coalesce(func.sum(Note.downloads), 0)).scalar(),
    }
