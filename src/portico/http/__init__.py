"""Immutable request and response types."""
