"""Recipe Tracker - recipe and ingredient management backed by SQLAlchemy."""

__version__ = "0.1.0"
