"""Bulk import of the subject -> topic -> content tree.

Subjects are matched on their slug and topics on (subject, slug); a match is
reused as is, never updated from the payload. Contents are always inserted,
so importing the same payload twice doubles the content rows while subject
and topic counts stay put.

Every row is committed as soon as it is created. When something fails
partway the rows written so far stay in the database and the remainder of
the payload is skipped; ``IngestionError`` carries the summary of what was
processed up to that point. Re-running the payload afterwards is safe for
subjects and topics but duplicates any contents that made it in.
"""
import logging
from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from edulearn.core.errors import IngestionError
from edulearn.models import Content, Subject, Topic
from edulearn.schemas.admin import ContentImport, SubjectImport, TopicImport

logger = logging.getLogger(__name__)


def find_or_create_subject(db: Session, data: SubjectImport) -> Tuple[Subject, bool]:
    subject = db.query(Subject).filter(Subject.slug == data.slug).first()
    if subject:
        return subject, False

    subject = Subject(
        name=data.name or data.slug,
        slug=data.slug,
        description=data.description,
        icon=data.icon,
        category=data.category,
        level=data.level,
        order=data.order,
    )
    db.add(subject)
    db.commit()
    db.refresh(subject)
    return subject, True


def find_or_create_topic(db: Session, subject: Subject, data: TopicImport) -> Tuple[Topic, bool]:
    topic = (
        db.query(Topic)
        .filter(Topic.slug == data.slug, Topic.subject_id == subject.id)
        .first()
    )
    if topic:
        return topic, False

    topic = Topic(
        subject_id=subject.id,
        title=data.title or data.slug,
        slug=data.slug,
        description=data.description,
        order=data.order,
        estimated_time=data.estimated_time,
        difficulty=data.difficulty,
    )
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic, True


def create_content(db: Session, topic: Topic, data: ContentImport) -> Content:
    content = Content(
        topic_id=topic.id,
        title=data.title,
        type=data.type,
        content=data.content,
        code_language=data.code_language,
        examples=[example.model_dump() for example in data.examples],
        exercises=[exercise.model_dump() for exercise in data.exercises],
        order=data.order,
    )
    db.add(content)
    db.commit()
    return content


def ingest(db: Session, subjects: List[SubjectImport]) -> List[dict]:
    results = []
    try:
        for subject_data in subjects:
            subject, subject_created = find_or_create_subject(db, subject_data)
            topic_results = []
            record = {
                "subject": subject.name,
                "slug": subject.slug,
                "created": subject_created,
                "topics": topic_results,
            }
            results.append(record)

            for topic_data in subject_data.topics:
                topic, topic_created = find_or_create_topic(db, subject, topic_data)
                topic_record = {
                    "topic": topic.title,
                    "slug": topic.slug,
                    "created": topic_created,
                    "contents": 0,
                }
                topic_results.append(topic_record)

                for content_data in topic_data.contents:
                    create_content(db, topic, content_data)
                    topic_record["contents"] += 1
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Bulk upload stopped after {len(results)} subject(s)")
        raise IngestionError("Server error", results=results) from exc

    topic_count = sum(len(record["topics"]) for record in results)
    logger.info(f"Bulk upload finished: {len(results)} subject(s), {topic_count} topic(s)")
    return results
