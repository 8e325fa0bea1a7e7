"""Core content model and lookups."""
