from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db, get_current_account
from edulearn.models import User
from edulearn.schemas.progress import ProgressDetailOut, ProgressEntryOut, ProgressUpdate
from edulearn.services.progress import list_progress, upsert_progress

router = APIRouter()


@router.post("", response_model=List[ProgressEntryOut])
def update_progress(
    payload: ProgressUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_account),
):
    return upsert_progress(db, current_user, payload.topic_id, payload.completed)


@router.get("", response_model=List[ProgressDetailOut])
def get_progress(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_account),
):
    return list_progress(db, current_user)
