"""
Note model: freeform annotation optionally attached to a card and/or project.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel, utcnow


class Note(BaseModel):
    __tablename__ = "notes"

    user_id = Column(UUID(), ForeignKey("users.id"), nullable=False, index=True)
    card_id = Column(UUID(), ForeignKey("cards.id"), index=True)
    project_id = Column(UUID(), ForeignKey("projects.id"), index=True)

    content = Column(Text, nullable=False)
    title = Column(String(255))
    label = Column(String(100))
    colour = Column(String(50))
    date = Column(DateTime, default=utcnow)

    # Relationships
    card = relationship("Card", back_populates="notes")
    project = relationship("Project", back_populates="notes")
