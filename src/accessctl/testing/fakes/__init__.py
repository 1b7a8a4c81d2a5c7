"""Testing fakes – in-memory doubles for directory ports."""
from accessctl.testing.fakes.directory import InMemoryDirectoryClient, entries_from_mapping

__all__ = ["InMemoryDirectoryClient", "entries_from_mapping"]
