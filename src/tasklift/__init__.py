"""
tasklift: convert a flat task-service export into a namespace -> list -> task hierarchy.

Subpackages:
- source: read-only records of the export (folders, lists, tasks, notes, files, ...)
- hierarchy: output model handed to a persistence collaborator
- convert: timestamp normalizer, reference index, attachment resolver, task converter, builder
- migration: run supervisor (retry policy + sink handoff)
"""

__version__ = "0.1.0"
