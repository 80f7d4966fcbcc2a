"""
Checklist item attached to a card.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class ChecklistItem(BaseModel):
    __tablename__ = "checklist_items"

    card_id = Column(UUID(), ForeignKey("cards.id"), nullable=False, index=True)
    task = Column(String(500), nullable=False)
    status = Column(String(10), nullable=False, default="To-do")  # Done, To-do
    position = Column(Integer, nullable=False, default=0)

    card = relationship("Card", back_populates="checklist")
