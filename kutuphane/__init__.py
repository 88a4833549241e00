"""Library management: books, members, loans and returns with late fines, kept in SQLite."""

__version__ = "0.1.0"