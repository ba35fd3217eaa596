"""Meetup queries (read side)."""

from .list_meetups import ListMeetupsQuery, ListMeetupsQueryHandler

__all__ = ["ListMeetupsQuery", "ListMeetupsQueryHandler"]
