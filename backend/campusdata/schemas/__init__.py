"""
Campus Data Backend — Pydantic Schemas Package
===============================================

API contracts, kept separate from the SQLAlchemy models so the wire format
(camelCase, explicit identifiers) can evolve independently of the tables.
"""
