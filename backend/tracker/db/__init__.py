"""Database Infrastructure — declarative base shared by the ORM models."""
