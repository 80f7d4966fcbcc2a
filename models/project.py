"""
Project model for grouping cards and reporting time spent on them.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class Project(BaseModel):
    """
    Represents a project entity in the application.

    Deleting a project leaves its cards and notes in place with their
    ``project_id`` cleared.
    """

    __tablename__ = "projects"

    user_id = Column(UUID(), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    due_date = Column(DateTime)
    estimated_hours = Column(Float)

    # Relationships
    cards = relationship("Card", back_populates="project", order_by="Card.creation_date")
    notes = relationship("Note", back_populates="project")
