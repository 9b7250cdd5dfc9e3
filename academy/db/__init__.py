"""Database base, sessions and initialization."""
