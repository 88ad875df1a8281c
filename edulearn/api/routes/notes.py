from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db, get_current_admin
from edulearn.core.identity import AdminIdentity
from edulearn.schemas.note import NoteDeleteResponse, NoteOut, NoteUploadResponse
from edulearn.services import notes

router = APIRouter()


@router.get("", response_model=List[NoteOut])
def list_notes(subject: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return notes.list_notes(db, subject)


@router.get("/filters/subjects", response_model=List[str])
def note_subjects(db: Session = Depends(get_db)):
    return notes.list_note_subjects(db)


@router.post("/upload", response_model=NoteUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_note(
    pdf: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
) -> NoteUploadResponse:
    note = notes.save_note(db, pdf, title, description, subject, uploaded_by_id=current_admin.id)
    return NoteUploadResponse(message="Note uploaded successfully", note=NoteOut.model_validate(note))


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: int, db: Session = Depends(get_db)):
    return notes.get_note(db, note_id)


@router.get("/{note_id}/download")
def download_note(note_id: int, db: Session = Depends(get_db)):
    note = notes.register_download(db, note_id)
    return FileResponse(notes.stored_path(note), filename=note.file_name, media_type=notes.PDF_MIME)


@router.delete("/{note_id}", response_model=NoteDeleteResponse)
def delete_note(
    note_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
) -> NoteDeleteResponse:
    notes.delete_note(db, note_id)
    return NoteDeleteResponse(message="Note deleted successfully")
