"""
A module defining the `Card` ORM model representing a single task.

A card always belongs to exactly one list and optionally to one project.
Time spent on the card is kept as closed intervals in `TimeEntry` rows; an
interval that is still running is marked by `ticking_from`.

Classes:
    Card: Represents a task with its schedule, estimate, checklist, time log
    and relationships with its list, project and notes.
"""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel, utcnow


class Card(BaseModel):
    __tablename__ = "cards"

    user_id = Column(UUID(), ForeignKey("users.id"), nullable=False, index=True)
    list_id = Column(UUID(), ForeignKey("lists.id"), nullable=False, index=True)
    project_id = Column(UUID(), ForeignKey("projects.id"), index=True)

    title = Column(String(500), nullable=False)
    description = Column(Text)
    creation_date = Column(DateTime, default=utcnow)
    due_date = Column(DateTime)
    estimated_hours = Column(Float)
    position = Column(Integer, nullable=False, default=0)
    ticking_from = Column(DateTime)  # start of the running timer, NULL when stopped
    activity_log = Column(JSON, nullable=False, default=list)

    # Relationships
    list = relationship("TaskList", back_populates="cards")
    project = relationship("Project", back_populates="cards")
    notes = relationship("Note", back_populates="card", order_by="Note.date")
    time_entries = relationship(
        "TimeEntry",
        back_populates="card",
        cascade="all, delete-orphan",
        order_by="TimeEntry.start",
    )
    checklist = relationship(
        "ChecklistItem",
        back_populates="card",
        cascade="all, delete-orphan",
        order_by="ChecklistItem.position",
    )

    @property
    def note_ids(self):
        return [note.id for note in self.notes]

    @property
    def hours_spent(self) -> float:
        minutes = sum(entry.minutes for entry in self.time_entries)
        return round(minutes / 60, 1)

    @property
    def is_ticking(self) -> bool:
        return self.ticking_from is not None

    def log_activity(self, entry: str) -> None:
        """Append a timestamped entry to the activity log."""
        stamped = f"{utcnow().isoformat(timespec='seconds')} {entry}"
        # reassign so the JSON column is flagged as modified
        self.activity_log = [*(self.activity_log or []), stamped]
