"""Core utilities: constants, exceptions, identifiers and pagination."""
