"""Meetup commands (write side)."""

from .create_meetup import CreateMeetupCommand, CreateMeetupCommandHandler

__all__ = ["CreateMeetupCommand", "CreateMeetupCommandHandler"]
