"""Repository layer for the message and visit counter tables."""

from .visit_repository import QueryError, VisitRepository

__all__ = ['QueryError', 'VisitRepository']
