"""Meetup GraphQL backend."""
