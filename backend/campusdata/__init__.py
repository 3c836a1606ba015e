"""
Campus Data Backend — Application Package Initializer
======================================================

What: Marks the `campusdata` directory as a Python package.
Why:  Enables module imports like `from campusdata.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture, one slice per campus resource:

    ┌─────────────────────────────────────┐
    │      Routes (Resource Controllers)  │  ← HTTP + capability checks
    ├─────────────────────────────────────┤
    │   Services (CRUD orchestration)     │  ← not-found / conflict rules
    ├─────────────────────────────────────┤
    │   Repositories (data access)        │  ← named, parameterized queries
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Identity and roles live beside this stack in `campusdata.auth` and are
    injected into controllers as a FastAPI dependency.
"""

__version__ = "1.0.0"
