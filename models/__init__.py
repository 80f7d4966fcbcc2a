"""
Models package initialization.
"""

from .base import Base, BaseModel
from .card import Card
from .checklist_item import ChecklistItem
from .note import Note
from .project import Project
from .task_list import TaskList
from .time_entry import TimeEntry
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "TaskList",
    "Card",
    "ChecklistItem",
    "TimeEntry",
    "Project",
    "Note",
]
