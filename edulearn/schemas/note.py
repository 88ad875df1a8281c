from datetime import datetime
from typing import Optional

from edulearn.schemas.base import CamelModel


class UploaderOut(CamelModel):
    id: int
    username: str


class NoteOut(CamelModel):
    id: int
    title: str
    description: str
    subject: str
    file_name: str
    file_url: str
    file_size: int
    downloads: int
    uploaded_by: Optional[UploaderOut] = None
    created_at: Optional[datetime] = None


class NoteUploadResponse(CamelModel):
    message: str
    note: NoteOut


class NoteDeleteResponse(CamelModel):
    message: str
