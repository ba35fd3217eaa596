"""Domain layer for meetups.

Business entities, value objects, errors and ports, decoupled from the
GraphQL presentation and from the storage infrastructure.
"""
