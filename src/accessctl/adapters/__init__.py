"""Adapters – concrete backends for accessctl ports."""
