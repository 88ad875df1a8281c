import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db, get_current_admin, get_current_superadmin
from edulearn.core.config import get_settings
from edulearn.core.errors import IngestionError
from edulearn.core.identity import AdminIdentity
from edulearn.core.security import create_admin_token
from edulearn.models import Admin
from edulearn.schemas.admin import BulkUploadRequest, BulkUploadResponse, SubjectResult, StatsOut
from edulearn.schemas.auth import (
    AdminCreateRequest,
    AdminLoginResponse,
    AdminOut,
    LoginRequest,
    MessageResponse,
)
from edulearn.schemas.catalog import SubjectCreate, SubjectOut, SubjectUpdate
from edulearn.services import catalog
from edulearn.services.auth import authenticate_admin, create_admin
from edulearn.services.ingestion import ingest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=AdminLoginResponse)
def admin_login(request: LoginRequest, db: Session = Depends(get_db)) -> AdminLoginResponse:
    admin = authenticate_admin(db, request.email, request.password)
    if not admin:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    logger.info(f"Admin logged in: {admin.email}")
    return AdminLoginResponse(token=create_admin_token(admin.id), admin=AdminOut.model_validate(admin))


@router.post("/create", response_model=MessageResponse)
def admin_create(
    request: AdminCreateRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_superadmin),
) -> MessageResponse:
    create_admin(db, request.username, request.email, request.password, request.role)
    return MessageResponse(msg="Admin created successfully")


@router.get("/subjects", response_model=List[SubjectOut])
def admin_subjects(
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
):
    return catalog.list_all_subjects(db)


@router.post("/subjects", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def admin_create_subject(
    payload: SubjectCreate,
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
):
    return catalog.create_subject(db, payload)


@router.put("/subjects/{subject_id}", response_model=SubjectOut)
def admin_update_subject(
    subject_id: int,
    payload: SubjectUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
):
    return catalog.update_subject(db, subject_id, payload)


@router.delete("/subjects/{subject_id}", response_model=MessageResponse)
def admin_delete_subject(
    subject_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
) -> MessageResponse:
    catalog.delete_subject(db, subject_id, cascade=get_settings().cascade_subject_delete)
    return MessageResponse(msg="Subject deleted")


@router.post("/bulk-upload", response_model=BulkUploadResponse)
def bulk_upload(
    payload: BulkUploadRequest,
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
):
    try:
        results = ingest(db, payload.subjects)
    except IngestionError as exc:
        partial = [SubjectResult(**record).model_dump(by_alias=True) for record in exc.results]
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": exc.detail, "results": partial},
        )
    return BulkUploadResponse(msg="Bulk upload successful", results=results)


@router.get("/stats", response_model=StatsOut)
def admin_stats(
    db: Session = Depends(get_db),
    current_admin: AdminIdentity = Depends(get_current_admin),
) -> StatsOut:
    return StatsOut(**catalog.collect_stats(db))
