"""Serialization boundary for state-store and UI consumers."""
