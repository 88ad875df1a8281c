import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from edulearn.db.base import Base


class TopicDifficulty(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


topic_prerequisites = Table(
    "topic_prerequisites",
    Base.metadata,
    Column("topic_id", Integer, ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True),
    Column("prerequisite_id", Integer, ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True),
)


class Topic(Base):
    __tablename__ = "topics"
    __table_args__ = (UniqueConstraint("subject_id", "slug", name="uq_topics_subject_slug"),)

    id = Column(Integer, primary_key=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    estimated_time = Column(Integer, nullable=True)
    difficulty = Column(Enum(TopicDifficulty, name="topic_difficulty"), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    subject = relationship("Subject", back_populates="topics")
    prerequisites = relationship(
        "Topic",
        secondary=topic_prerequisites,
        primaryjoin=id == topic_prerequisites.c.topic_id,
        secondaryjoin=id == topic_prerequisites.c.prerequisite_id,
    )
    contents = relationship("Content", back_populates="topic", cascade="all, delete-orphan")

    @property
    def prerequisite_ids(self) -> list:
        return [topic.id for topic in self.prerequisites]
