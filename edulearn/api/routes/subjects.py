from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db
from edulearn.schemas.catalog import SubjectOut
from edulearn.services import catalog

router = APIRouter()


@router.get("", response_model=List[SubjectOut])
def list_subjects(db: Session = Depends(get_db)):
    return catalog.list_active_subjects(db)


@router.get("/{slug}", response_model=SubjectOut)
def get_subject(slug: str, db: Session = Depends(get_db)):
    return catalog.get_subject_by_slug(db, slug)
