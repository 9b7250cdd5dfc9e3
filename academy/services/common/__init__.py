"""Shared service helpers."""
