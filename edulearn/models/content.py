import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, JSON
from sqlalchemy.orm import relationship

from edulearn.db.base import Base


class ContentType(str, enum.Enum):
    text = "text"
    code = "code"
    example = "example"
    exercise = "exercise"
    quiz = "quiz"


class Content(Base):
    __tablename__ = "contents"

    id = Column(Integer, primary_key=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    type = Column(Enum(ContentType, name="content_type"), nullable=False)
    content = Column(Text, nullable=False, default="")
    code_language = Column(String, nullable=True)
    examples = Column(JSON, nullable=False, default=list)
    exercises = Column(JSON, nullable=False, default=list)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    topic = relationship("Topic", back_populates="contents")
