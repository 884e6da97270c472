# src/tasklift/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The converter depends on Protocols instead of concrete implementations, so the
attachment transport and the persistence collaborator stay swappable and tests
can use fakes.
"""

from collections.abc import Sequence
from typing import Awaitable, Protocol

from ..hierarchy.models import NamespaceGroup, TaskAttachment
from ..source.models import FileRecord, SourceExport


class AttachmentSource(Protocol):
    """Turns file records into self-contained attachments (downloads the payload)."""

    def resolve(self, record: FileRecord) -> Awaitable[TaskAttachment]: ...

    def resolve_all(self, records: Sequence[FileRecord]) -> Awaitable[list[TaskAttachment]]: ...


class HierarchySink(Protocol):
    """
    Persistence-side port: receives a complete converted hierarchy.

    Called at most once per successful run, never with a partial hierarchy.
    """

    def save(self, groups: list[NamespaceGroup]) -> Awaitable[None]: ...


class HierarchyBuilderPort(Protocol):
    def build(self, export: SourceExport) -> Awaitable[list[NamespaceGroup]]: ...
