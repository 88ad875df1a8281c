import os

import pytest
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from edulearn.models import Note
from edulearn.services import notes

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"
NOTE_FORM = {"title": "Algebra Basics", "description": "Intro", "subject": "Math"}


def _upload(client, headers, data=None, filename="algebra.pdf", content=PDF_BYTES, mime="application/pdf"):
    return client.post(
        "/api/notes/upload",
        headers=headers,
        data=NOTE_FORM if data is None else data,
        files={"pdf": (filename, content, mime)},
    )


def _stored_files():
    directory = notes.notes_dir()
    return os.listdir(directory) if os.path.isdir(directory) else []


def test_upload_note(client, db_session, admin_headers, superadmin):
    response = _upload(client, admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["message"] == "Note uploaded successfully"
    note = body["note"]
    assert note["downloads"] == 0
    assert note["fileSize"] == len(PDF_BYTES)
    assert note["fileName"] == "algebra.pdf"
    assert note["fileUrl"].startswith("/uploads/notes/")
    assert note["fileUrl"].endswith(".pdf")
    assert note["uploadedBy"] == {"id": superadmin.id, "username": "admin"}

    stored = db_session.query(Note).one()
    assert os.path.exists(notes.stored_path(stored))


def test_upload_requires_admin(client, user_headers):
    response = _upload(client, user_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_upload_rejects_missing_fields_without_leaving_files(client, admin_headers):
    before = _stored_files()
    response = _upload(client, admin_headers, data={"title": "Only title"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Please provide all required fields"
    assert _stored_files() == before


def test_upload_rejects_non_pdf(client, admin_headers):
    response = _upload(client, admin_headers, filename="notes.txt", content=b"hello", mime="text/plain")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_upload_requires_file(client, admin_headers):
    response = client.post("/api/notes/upload", headers=admin_headers, data=NOTE_FORM)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Please upload a PDF file"


def test_upload_too_large_removes_partial_file(client, admin_headers, monkeypatch):
    from edulearn.core.config import get_settings

    monkeypatch.setattr(get_settings(), "max_note_size", 10)
    before = _stored_files()
    response = _upload(client, admin_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "File too large"
    assert _stored_files() == before


def test_download_increments_counter(client, db_session, admin_headers):
    note_id = _upload(client, admin_headers).json()["note"]["id"]

    for expected in (1, 2, 3):
        response = client.get(f"/api/notes/{note_id}/download")
        assert response.status_code == status.HTTP_200_OK
        assert response.content == PDF_BYTES
        assert "algebra.pdf" in response.headers["content-disposition"]
        assert client.get(f"/api/notes/{note_id}").json()["downloads"] == expected


def test_download_missing_note(client):
    assert client.get("/api/notes/999/download").status_code == status.HTTP_404_NOT_FOUND


def test_download_with_missing_file(client, db_session, admin_headers):
    note_id = _upload(client, admin_headers).json()["note"]["id"]
    note = db_session.query(Note).filter(Note.id == note_id).one()
    os.remove(notes.stored_path(note))

    response = client.get(f"/api/notes/{note_id}/download")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "File not found"
    db_session.refresh(note)
    assert note.downloads == 0


def test_list_and_filter_notes(client, admin_headers):
    _upload(client, admin_headers)
    _upload(client, admin_headers, data={"title": "Forces", "description": "Newton", "subject": "Physics"})

    assert len(client.get("/api/notes").json()) == 2
    physics = client.get("/api/notes", params={"subject": "Physics"}).json()
    assert [item["title"] for item in physics] == ["Forces"]
    assert client.get("/api/notes/filters/subjects").json() == ["Math", "Physics"]


def test_delete_note_removes_file(client, db_session, admin_headers):
    note_id = _upload(client, admin_headers).json()["note"]["id"]
    path = notes.stored_path(db_session.query(Note).filter(Note.id == note_id).one())

    response = client.delete(f"/api/notes/{note_id}", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    assert not os.path.exists(path)
    assert client.get(f"/api/notes/{note_id}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_note_keeps_file_when_commit_fails(client, db_session, admin_headers, monkeypatch):
    note_id = _upload(client, admin_headers).json()["note"]["id"]
    path = notes.stored_path(db_session.query(Note).filter(Note.id == note_id).one())

    def failing_commit():
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(SQLAlchemyError):
        notes.delete_note(db_session, note_id)
    monkeypatch.undo()
    db_session.rollback()

    assert os.path.exists(path)
    assert db_session.query(Note).filter(Note.id == note_id).count() == 1
    response = client.get(f"/api/notes/{note_id}/download")
    assert response.status_code == status.HTTP_200_OK
    assert response.content == PDF_BYTES


def test_delete_note_requires_admin(client, admin_headers, user_headers):
    note_id = _upload(client, admin_headers).json()["note"]["id"]
    response = client.delete(f"/api/notes/{note_id}", headers=user_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_stats_sum_downloads(client, admin_headers):
    note_id = _upload(client, admin_headers).json()["note"]["id"]
    client.get(f"/api/notes/{note_id}/download")
    client.get(f"/api/notes/{note_id}/download")

    stats = client.get("/api/admin/stats", headers=admin_headers).json()
    assert stats["notes"] == 1
    assert stats["totalDownloads"] == 2
