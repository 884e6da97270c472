"""Read-only records of a source export (ids instead of object references)."""
