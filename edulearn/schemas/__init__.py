from edulearn.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserProfileOut,
    AdminOut,
    AdminLoginResponse,
    AdminCreateRequest,
    MessageResponse,
)
from edulearn.schemas.catalog import (
    SubjectOut,
    SubjectCreate,
    SubjectUpdate,
    TopicOut,
    TopicDetailOut,
    ContentOut,
)
from edulearn.schemas.admin import (
    BulkUploadRequest,
    BulkUploadResponse,
    SubjectImport,
    TopicImport,
    ContentImport,
    StatsOut,
)
from edulearn.schemas.note import NoteOut, NoteUploadResponse, NoteDeleteResponse
from edulearn.schemas.progress import ProgressUpdate, ProgressEntryOut, ProgressDetailOut

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserProfileOut",
    "AdminOut",
    "AdminLoginResponse",
    "AdminCreateRequest",
    "MessageResponse",
    "SubjectOut",
    "SubjectCreate",
    "SubjectUpdate",
    "TopicOut",
    "TopicDetailOut",
    "ContentOut",
    "BulkUploadRequest",
    "BulkUploadResponse",
    "SubjectImport",
    "TopicImport",
    "ContentImport",
    "StatsOut",
    "NoteOut",
    "NoteUploadResponse",
    "NoteDeleteResponse",
    "ProgressUpdate",
    "ProgressEntryOut",
    "ProgressDetailOut",
]
