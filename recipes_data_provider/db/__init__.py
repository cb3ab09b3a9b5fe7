"""Database metadata — the SQLAlchemy declarative Base shared by models and migrations."""
