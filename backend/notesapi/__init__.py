"""
Notes Backend - Application Package
===================================

What: A small CRUD service for notes (create, list, read, update, delete)
      backed by a relational store and exposed as a JSON HTTP API.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │   Services (validation, sanitize,   │  ← NoteService: one statement
    │   data access)                      │    per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy model + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async engine, pooled connections
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
