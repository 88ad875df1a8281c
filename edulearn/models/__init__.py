from edulearn.models.admin import Admin, AdminRole
from edulearn.models.user import User, ProgressEntry, Theme
from edulearn.models.subject import Subject, SubjectCategory, SubjectLevel
from edulearn.models.topic import Topic, TopicDifficulty
from edulearn.models.content import Content, ContentType
from edulearn.models.note import Note

__all__ = [
    "Admin",
    "AdminRole",
    "User",
    "ProgressEntry",
    "Theme",
    "Subject",
    "SubjectCategory",
    "SubjectLevel",
    "Topic",
    "TopicDifficulty",
    "Content",
    "ContentType",
    "Note",
]
