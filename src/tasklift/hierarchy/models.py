# src/tasklift/hierarchy/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class RelationKind(StrEnum):
    """
    Kind of link between two tasks. Subtasks are the only links a source
    export carries.
    """

    SUBTASK = "subtask"


@dataclass(frozen=True, slots=True)
class AttachmentFile:
    name: str
    mime: str
    size: int
    created: datetime | None
    created_unix: int
    content: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class TaskAttachment:
    file: AttachmentFile
    created: int  # when the attachment was linked to the task


@dataclass(frozen=True, slots=True)
class RelatedTask:
    """Relation stub: only the title of the related task is known here."""

    text: str


@dataclass(slots=True)
class TaskOut:
    text: str
    done: bool = False
    done_at: int = 0  # 0 unless done
    due_date: int = 0
    created: int = 0
    description: str = ""
    attachments: list[TaskAttachment] = field(default_factory=list)
    reminders: list[int] = field(default_factory=list)
    # a kind with no relations has no key at all
    related_tasks: dict[RelationKind, list[RelatedTask]] = field(default_factory=dict)


@dataclass(slots=True)
class ListGroup:
    title: str
    created: int = 0
    tasks: list[TaskOut] = field(default_factory=list)


@dataclass(slots=True)
class NamespaceGroup:
    name: str
    created: int = 0
    updated: int = 0
    lists: list[ListGroup] = field(default_factory=list)
