import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from edulearn.db.base import Base


class Theme(str, enum.Enum):
    light = "light"
    dark = "dark"


user_bookmarks = Table(
    "user_bookmarks",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("content_id", Integer, ForeignKey("contents.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    theme = Column(Enum(Theme, name="theme"), nullable=False, default=Theme.light)
    language = Column(String, nullable=False, default="en")
    created_at = Column(DateTime, default=datetime.utcnow)

    progress = relationship(
        "ProgressEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="ProgressEntry.id",
    )
    bookmarks = relationship("Content", secondary=user_bookmarks)


class ProgressEntry(Base):
    __tablename__ = "progress_entries"
    __table_args__ = (UniqueConstraint("user_id", "topic_id", name="uq_progress_user_topic"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    last_accessed = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="progress")
    topic = relationship("Topic")
