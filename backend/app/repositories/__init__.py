from app.repositories.base import MatchRepository
from app.repositories.memory import InMemoryMatchRepository, MatchStore
from app.repositories.sql import SqlMatchRepository

__all__ = [
    "InMemoryMatchRepository",
    "MatchRepository",
    "MatchStore",
    "SqlMatchRepository",
]
