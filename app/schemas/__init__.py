# ruff: noqa: F403, F401
"""Schemas package initialization."""

from .base import *
from .card import *
from .list import *
from .note import *
from .project import *
from .user import *
