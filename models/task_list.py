"""
TaskList model: a named column of cards.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel, utcnow


class TaskList(BaseModel):
    """
    Represents a list (board column) owned by a user.

    The card collection is derived from ``Card.list_id`` and kept in the
    order cards were appended to the list.
    """

    __tablename__ = "lists"

    user_id = Column(UUID(), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    creation_date = Column(DateTime, default=utcnow)

    # Relationships
    user = relationship("User", back_populates="lists")
    cards = relationship("Card", back_populates="list", order_by="Card.position")
