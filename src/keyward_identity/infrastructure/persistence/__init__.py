"""Persistence implementations of the identity repositories.

- ``sqlalchemy``: async SQLAlchemy (PostgreSQL)
- ``memory``: process-local, for tests and embedding
"""
