"""
Conversion pipeline.

Components:
- timestamps.py: epoch-seconds normalization (full timestamps, date-only strings)
- index.py: read-only parent -> children lookups built once per export
- attachments.py: payload download + attachment assembly (httpx, bounded concurrency)
- task_converter.py: one source task -> TaskOut
- hierarchy.py: folders/lists/tasks -> ordered NamespaceGroups
"""

from .hierarchy import HierarchyBuilder, build_hierarchy

__all__ = ["HierarchyBuilder", "build_hierarchy"]
