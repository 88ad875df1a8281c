from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db
from edulearn.schemas.catalog import TopicDetailOut, TopicOut
from edulearn.services import catalog

router = APIRouter()


@router.get("/subject/{subject_id}", response_model=List[TopicOut])
def topics_by_subject(subject_id: int, db: Session = Depends(get_db)):
    return catalog.list_active_topics(db, subject_id)


@router.get("/{slug}", response_model=TopicDetailOut)
def topic_by_slug(slug: str, db: Session = Depends(get_db)):
    return catalog.get_topic_by_slug(db, slug)
