"""
Closed time-tracking interval logged against a card.
"""

from sqlalchemy import Column, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class TimeEntry(BaseModel):
    __tablename__ = "time_entries"

    card_id = Column(UUID(), ForeignKey("cards.id"), nullable=False, index=True)
    start = Column(DateTime, nullable=False)
    stop = Column(DateTime, nullable=False)

    card = relationship("Card", back_populates="time_entries")

    @property
    def minutes(self) -> float:
        return (self.stop - self.start).total_seconds() / 60
