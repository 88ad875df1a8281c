from typing import List, Optional

from pydantic import Field

from edulearn.models import ContentType, SubjectCategory, SubjectLevel, TopicDifficulty
from edulearn.schemas.base import CamelModel
from edulearn.schemas.catalog import ContentExample, ContentExercise


class ContentImport(CamelModel):
    title: str = Field(min_length=1)
    type: ContentType = ContentType.text
    content: str = ""
    code_language: Optional[str] = None
    examples: List[ContentExample] = []
    exercises: List[ContentExercise] = []
    order: int = 0


class TopicImport(CamelModel):
    slug: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    order: int = 0
    estimated_time: Optional[int] = None
    difficulty: Optional[TopicDifficulty] = None
    contents: List[ContentImport] = []


class SubjectImport(CamelModel):
    slug: str = Field(min_length=1)
    name: Optional[str] = None
    description: str = ""
    icon: Optional[str] = None
    category: SubjectCategory = SubjectCategory.other
    level: Optional[SubjectLevel] = None
    order: int = 0
    topics: List[TopicImport] = []


class BulkUploadRequest(CamelModel):
    subjects: List[SubjectImport]


class TopicResult(CamelModel):
    topic: str
    slug: str
    created: bool
    contents: int


class SubjectResult(CamelModel):
    subject: str
    slug: str
    created: bool
    topics: List[TopicResult] = []


class BulkUploadResponse(CamelModel):
    msg: str
    results: List[SubjectResult]


class StatsOut(CamelModel):
    subjects: int
    topics: int
    contents: int
    notes: int
    total_downloads: int
