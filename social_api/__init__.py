"""
Social API — Application Package
==================================

A minimal social-media backend: account registration/login and message CRUD
over HTTP, backed by a relational database.

Architecture:

    ┌─────────────────────────────────────┐
    │           Routes (HTTP)             │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← validation, orchestration
    ├─────────────────────────────────────┤
    │       Repositories (Storage)        │  ← parameterized statements
    ├─────────────────────────────────────┤
    │   Models & Database (Persistence)   │  ← SQLAlchemy ORM, async sessions
    └─────────────────────────────────────┘

Each request flows routes → services → repositories and back; there is no
state shared between requests apart from the database itself.
"""

__version__ = "1.0.0"
