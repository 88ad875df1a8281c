from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from edulearn.models import ContentType, SubjectCategory, SubjectLevel, TopicDifficulty
from edulearn.schemas.base import CamelModel


class SubjectOut(CamelModel):
    id: int
    name: str
    slug: str
    description: str
    icon: Optional[str] = None
    category: SubjectCategory
    level: Optional[SubjectLevel] = None
    order: int
    is_active: bool
    created_at: Optional[datetime] = None


class SubjectCreate(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: str
    icon: Optional[str] = None
    category: SubjectCategory
    level: Optional[SubjectLevel] = None
    order: int = 0
    is_active: bool = True


class SubjectUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[SubjectCategory] = None
    level: Optional[SubjectLevel] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("name", "slug", "description", "category", "order", "is_active")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TopicOut(CamelModel):
    id: int
    subject_id: Optional[int] = None
    title: str
    slug: str
    description: Optional[str] = None
    order: int
    estimated_time: Optional[int] = None
    difficulty: Optional[TopicDifficulty] = None
    prerequisite_ids: List[int] = []
    is_active: bool


class TopicDetailOut(TopicOut):
    subject: Optional[SubjectOut] = None
    prerequisites: List[TopicOut] = []


class ContentExample(CamelModel):
    title: Optional[str] = None
    code: Optional[str] = None
    explanation: Optional[str] = None


class ContentExercise(CamelModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    hints: List[str] = []


class ContentOut(CamelModel):
    id: int
    topic_id: int
    title: str
    type: ContentType
    content: str
    code_language: Optional[str] = None
    examples: List[ContentExample] = []
    exercises: List[ContentExercise] = []
    order: int
