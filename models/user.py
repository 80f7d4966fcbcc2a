"""
Provides the User model for the application's database schema.

A user owns every list, card, project and note they create. Only the
password hash is stored; the clear-text password never reaches the database.

Attributes
----------
username : sqlalchemy.Column
    Unique login name of the user.
first_name, last_name : sqlalchemy.Column
    Optional display name parts.
password_hash : sqlalchemy.Column
    bcrypt hash of the user's password.

Relationships
-------------
lists : sqlalchemy.orm.relationship
    One-to-many relationship with the `TaskList` model, ordered by creation.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class User(BaseModel):
    """
    Represents a registered user.

    :ivar username: Username of the user. It must be unique.
    :type username: str
    :ivar first_name: First name of the user.
    :type first_name: str
    :ivar last_name: Last name of the user.
    :type last_name: str
    :ivar password_hash: bcrypt hash of the password.
    :type password_hash: str
    """

    __tablename__ = "users"

    username = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    password_hash = Column(String(255), nullable=False)

    lists = relationship(
        "TaskList",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="TaskList.creation_date",
    )

    @property
    def name(self) -> str:
        """Full display name built from the first and last name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
