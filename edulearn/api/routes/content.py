from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db
from edulearn.schemas.catalog import ContentOut
from edulearn.services import catalog

router = APIRouter()


@router.get("/topic/{topic_id}", response_model=List[ContentOut])
def contents_by_topic(topic_id: int, db: Session = Depends(get_db)):
    return catalog.list_topic_contents(db, topic_id)
