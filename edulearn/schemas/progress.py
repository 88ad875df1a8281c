from datetime import datetime

from edulearn.schemas.base import CamelModel
from edulearn.schemas.catalog import TopicOut


class ProgressUpdate(CamelModel):
    topic_id: int
    completed: bool = False


class ProgressEntryOut(CamelModel):
    topic_id: int
    completed: bool
    last_accessed: datetime


class ProgressDetailOut(ProgressEntryOut):
    topic: TopicOut
