"""SQLAlchemy ORM models: Account and Message."""
