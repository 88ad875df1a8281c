import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship

from edulearn.db.base import Base


class SubjectCategory(str, enum.Enum):
    programming = "programming"
    mathematics = "mathematics"
    languages = "languages"
    science = "science"
    other = "other"


class SubjectLevel(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"
    all = "all"


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(String, nullable=False, default="")
    icon = Column(String, nullable=True)
    category = Column(Enum(SubjectCategory, name="subject_category"), nullable=False)
    level = Column(Enum(SubjectLevel, name="subject_level"), nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Deleting a subject goes through services.catalog, which decides whether topics follow.
    topics = relationship("Topic", back_populates="subject", passive_deletes="all")
