"""Testing – in-memory doubles for accessctl ports."""
