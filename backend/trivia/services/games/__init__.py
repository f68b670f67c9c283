"""Game domain services: session lifecycle, question play and broadcasts.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics. Every mutating function runs as a single
database transaction: it commits on success and rolls back before raising
a rejection, so readers never observe a partial write.
"""
