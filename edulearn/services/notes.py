"""Notes library: PDF storage on local disk plus the download counter."""
import logging
import os
import random
import time
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session, selectinload

from edulearn.core.config import get_settings
from edulearn.core.errors import FileMissingError, NotFoundError, ValidationFailedError
from edulearn.models import Note

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
CHUNK_SIZE = 1024 * 1024


def notes_dir() -> str:
    return os.path.join(get_settings().files_dir, "notes")


def stored_path(note: Note) -> str:
    return os.path.join(notes_dir(), os.path.basename(note.file_url))


def _stored_name(original_name: str) -> str:
    _, ext = os.path.splitext(original_name or "")
    return f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}{ext.lower()}"


def _write_upload(upload: UploadFile, path: str, max_size: int) -> int:
    size = 0
    try:
        with open(path, "wb") as output:
            while True:
                chunk = upload.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_size:
                    raise ValidationFailedError("File too large")
                output.write(chunk)
    except Exception:
        if os.path.exists(path):
            os.remove(path)
        raise
    return size


def list_notes(db: Session, subject: Optional[str] = None) -> List[Note]:
    query = db.query(Note).options(selectinload(Note.uploaded_by))
    if subject:
        query = query.filter(Note.subject == subject)
    return query.order_by(Note.created_at.desc(), Note.id.desc()).all()


def get_note(db: Session, note_id: int) -> Note:
    note = db.query(Note).filter(Note.id == note_id).first()
    if not note:
        raise NotFoundError("Note not found")
    return note


def list_note_subjects(db: Session) -> List[str]:
    rows = db.query(Note.subject).distinct().order_by(Note.subject).all()
    return [row.subject for row in rows]


def save_note(
    db: Session,
    upload: Optional[UploadFile],
    title: Optional[str],
    description: Optional[str],
    subject: Optional[str],
    uploaded_by_id: int,
) -> Note:
    if upload is None or not upload.filename:
        raise ValidationFailedError("Please upload a PDF file")
    if upload.content_type != PDF_MIME:
        raise ValidationFailedError("Only PDF files are allowed")
    if not title or not description or not subject:
        raise ValidationFailedError("Please provide all required fields")

    settings = get_settings()
    os.makedirs(notes_dir(), exist_ok=True)
    name = _stored_name(upload.filename)
    path = os.path.join(notes_dir(), name)
    size = _write_upload(upload, path, settings.max_note_size)

    note = Note(
        title=title,
        description=description,
        subject=subject,
        file_name=upload.filename,
        file_url=f"{settings.files_base_url.rstrip('/')}/notes/{name}",
        file_size=size,
        uploaded_by_id=uploaded_by_id,
    )
    try:
        db.add(note)
        db.commit()
    except Exception:
        db.rollback()
        os.remove(path)
        raise
    db.refresh(note)
    logger.info(f"Note uploaded: {note.title} ({note.file_size} bytes)")
    return note


def register_download(db: Session, note_id: int) -> Note:
    """Bump the counter before the file is handed out; aborted transfers still count."""
    note = get_note(db, note_id)
    if not os.path.exists(stored_path(note)):
        raise FileMissingError("File not found")

    note.downloads += 1
    db.commit()
    db.refresh(note)
    logger.info(f"Note {note.id} downloaded ({note.downloads} total)")
    return note


def delete_note(db: Session, note_id: int) -> None:
    note = get_note(db, note_id)
    path = stored_path(note)
    db.delete(note)
    db.commit()
    # The file only goes once the row is gone, so a failed commit leaves the note downloadable.
    if os.path.exists(path):
        os.remove(path)
    logger.info(f"Note deleted: {note_id}")
